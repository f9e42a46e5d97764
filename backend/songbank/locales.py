"""
Locale registry
===============
Maps the supported locale identifiers to the vocabulary used for song text.

Only the locales in ``Locale`` exist; anything else resolves to the default
(``en-US``) instead of raising.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class Locale(str, Enum):
    EN_US = "en-US"
    DE_DE = "de-DE"
    UK_UA = "uk-UA"

    @classmethod
    def resolve(cls, value: Union[str, "Locale", None]) -> "Locale":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return DEFAULT_LOCALE


DEFAULT_LOCALE = Locale.EN_US


@dataclass(frozen=True)
class LocaleProfile:
    locale: Locale
    faker_locale: str
    display_name: str
    genres: Tuple[str, ...]
    adjectives: Tuple[str, ...]
    product_adjectives: Tuple[str, ...]
    product_materials: Tuple[str, ...]
    product_nouns: Tuple[str, ...]


_EN_US = LocaleProfile(
    locale=Locale.EN_US,
    faker_locale="en_US",
    display_name="English (USA)",
    genres=(
        "Rock", "Pop", "Jazz", "Blues", "Hip Hop", "Electronic",
        "Country", "R&B", "Metal", "Folk", "Indie", "Classical",
    ),
    adjectives=(
        "ancient", "bitter", "blazing", "bold", "brave", "broken", "calm",
        "careless", "crimson", "crystal", "dark", "distant", "electric",
        "empty", "endless", "fearless", "fragile", "frozen", "gentle",
        "golden", "hidden", "hollow", "honest", "hungry", "invisible",
        "lonely", "lucky", "mellow", "neon", "quiet", "restless", "silent",
        "silver", "sleepy", "stormy", "sweet", "tender", "velvet", "wild",
        "wistful",
    ),
    product_adjectives=(
        "Handcrafted", "Small", "Sleek", "Ergonomic", "Rustic", "Intelligent",
        "Gorgeous", "Incredible", "Fantastic", "Practical", "Refined",
        "Generic", "Awesome", "Elegant", "Modern", "Bespoke", "Luxurious",
        "Recycled",
    ),
    product_materials=(
        "Steel", "Wooden", "Concrete", "Plastic", "Cotton", "Granite",
        "Rubber", "Metal", "Soft", "Fresh", "Frozen", "Bronze", "Silk",
    ),
    product_nouns=(
        "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball",
        "Gloves", "Pants", "Shirt", "Table", "Shoes", "Hat", "Towels",
        "Soap", "Tuna", "Chicken", "Cheese", "Pizza", "Salad", "Chips",
    ),
)

_DE_DE = LocaleProfile(
    locale=Locale.DE_DE,
    faker_locale="de_DE",
    display_name="Deutsch (Deutschland)",
    genres=(
        "Rock", "Pop", "Schlager", "Techno", "Metal", "Jazz",
        "Volksmusik", "Hip Hop", "Punk", "Electronic", "Klassik", "Indie",
    ),
    adjectives=(
        "alt", "bitter", "blau", "dunkel", "ehrlich", "einsam", "ewig",
        "fern", "frei", "froh", "gebrochen", "golden", "heimlich", "hell",
        "kalt", "klar", "laut", "leise", "mutig", "neu", "rot", "ruhig",
        "sanft", "schnell", "schwer", "silbern", "still", "stolz", "süß",
        "tief", "traurig", "verloren", "warm", "weit", "wild", "zart",
    ),
    product_adjectives=(
        "Handgefertigt", "Klein", "Schlank", "Ergonomisch", "Rustikal",
        "Intelligent", "Prächtig", "Unglaublich", "Fantastisch", "Praktisch",
        "Elegant", "Modern", "Luxuriös", "Recycelt",
    ),
    product_materials=(
        "Stahl", "Holz", "Beton", "Kunststoff", "Baumwoll", "Granit",
        "Gummi", "Metall", "Bronze", "Seiden",
    ),
    product_nouns=(
        "Stuhl", "Auto", "Computer", "Tastatur", "Maus", "Fahrrad", "Ball",
        "Handschuhe", "Hose", "Hemd", "Tisch", "Schuhe", "Hut", "Handtücher",
        "Seife", "Käse", "Pizza", "Salat", "Würstchen",
    ),
)

_UK_UA = LocaleProfile(
    locale=Locale.UK_UA,
    faker_locale="uk_UA",
    display_name="Українська (Україна)",
    genres=(
        "Рок", "Поп", "Джаз", "Блюз", "Хіп-хоп", "Електронна",
        "Фольк", "Метал", "Інді", "Класична", "Реп", "Панк",
    ),
    adjectives=(
        "безкраїй", "білий", "вічний", "вільний", "гіркий", "глибокий",
        "далекий", "дикий", "живий", "забутий", "залізний", "зелений",
        "золотий", "зоряний", "легкий", "літній", "місячний", "молодий",
        "нічний", "новий", "осінній", "останній", "палкий", "повільний",
        "порожній", "рідний", "синій", "срібний", "сонячний", "старий",
        "теплий", "тихий", "холодний", "чорний", "ясний",
    ),
    product_adjectives=(
        "Саморобний", "Малий", "Елегантний", "Ергономічний", "Практичний",
        "Розумний", "Чудовий", "Неймовірний", "Фантастичний", "Сучасний",
        "Розкішний",
    ),
    product_materials=(
        "Сталевий", "Дерев'яний", "Бетонний", "Пластиковий", "Бавовняний",
        "Гранітний", "Гумовий", "Металевий", "Бронзовий", "Шовковий",
    ),
    product_nouns=(
        "Стілець", "Автомобіль", "Комп'ютер", "Велосипед", "М'яч", "Стіл",
        "Капелюх", "Рушник", "Светр", "Годинник", "Ліхтар", "Чайник",
    ),
)

REGISTRY: Dict[Locale, LocaleProfile] = {
    Locale.EN_US: _EN_US,
    Locale.DE_DE: _DE_DE,
    Locale.UK_UA: _UK_UA,
}


def get_profile(locale: Union[str, Locale, None]) -> LocaleProfile:
    return REGISTRY[Locale.resolve(locale)]


def supported_locales() -> Tuple[LocaleProfile, ...]:
    return tuple(REGISTRY[loc] for loc in Locale)
