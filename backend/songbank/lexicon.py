"""
Locale-aware lexical generator backed by Faker.

A ``Lexicon`` owns its own Faker instance, so concurrent generations never
share random state. ``reseed`` restarts the stream; every call after it
advances that single stream.
"""

from typing import List, Union

from faker import Faker

from .locales import Locale, LocaleProfile, get_profile


class Lexicon:
    def __init__(self, locale: Union[str, Locale, None] = None):
        self.profile: LocaleProfile = get_profile(locale)
        self._faker = Faker(self.profile.faker_locale)

    @property
    def locale(self) -> Locale:
        return self.profile.locale

    def reseed(self, seed: int) -> "Lexicon":
        self._faker.seed_instance(int(seed))
        return self

    def adjective(self) -> str:
        return self._faker.random_element(self.profile.adjectives)

    def organization_name(self) -> str:
        return self._faker.company()

    def full_name(self) -> str:
        return self._faker.name()

    def product_name(self) -> str:
        p = self.profile
        return " ".join(
            (
                self._faker.random_element(p.product_adjectives),
                self._faker.random_element(p.product_materials),
                self._faker.random_element(p.product_nouns),
            )
        )

    def paragraphs(self, count: int = 3) -> List[str]:
        return self._faker.paragraphs(nb=count)


def capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]
