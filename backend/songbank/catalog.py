"""
Content assembler: pages of song summaries and per-song reviews.

Non-text fields (title length, artist form, single/album, genre) come from one
Mulberry32 stream seeded with the page seed and shared across the whole page.
Text comes from a ``Lexicon`` reseeded with each item seed, so a song's words
depend only on (locale, item seed).
"""

import logging
import math
import random
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional, Union

from .lexicon import Lexicon, capitalize
from .locales import Locale
from .rng import make_rng
from .seeds import item_seed, normalize_item_seed, page_seed

logger = logging.getLogger(__name__)

SINGLE_LABEL = "Single"
REVIEW_PARAGRAPHS = 3


@dataclass
class SongSummary:
    index: int
    title: str
    artist: str
    album: str
    genre: str
    likes: int
    item_seed: int

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class SongDetail:
    review: str
    paragraphs: List[str]


def sample_likes(avg_likes: float, source: Callable[[], float] = random.random) -> int:
    """Whole part of ``avg_likes`` plus one with probability of its fraction.

    Deliberately unseeded: identical requests may see different like counts.
    """
    if avg_likes <= 0:
        return 0
    whole = math.floor(avg_likes)
    likes = int(whole)
    if source() < avg_likes - whole:
        likes += 1
    return likes


def generate_page(
    locale: Union[str, Locale, None],
    user_seed: int,
    page: int,
    page_size: int,
    avg_likes: float = 0.0,
    likes_source: Optional[Callable[[], float]] = None,
) -> List[SongSummary]:
    lexicon = Lexicon(locale)
    genres = lexicon.profile.genres
    ps = page_seed(user_seed, page)
    rng = make_rng(ps)
    source = likes_source or random.random
    start = (page - 1) * page_size

    logger.debug(f"Generating page {page} ({page_size} songs) for {lexicon.locale.value}, page seed {ps}")

    songs: List[SongSummary] = []
    for i in range(page_size):
        seed = item_seed(ps, i)
        lexicon.reseed(seed)

        word_count = 2 if rng() > 0.5 else 3
        title = " ".join(capitalize(lexicon.adjective()) for _ in range(word_count))

        if rng() > 0.5:
            artist = " ".join(lexicon.organization_name().split(" ")[:2])
        else:
            artist = lexicon.full_name()

        is_single = rng() > 0.7
        album = SINGLE_LABEL if is_single else lexicon.product_name()

        genre = genres[rng.index(len(genres))]

        songs.append(
            SongSummary(
                index=start + i + 1,
                title=title,
                artist=artist,
                album=album,
                genre=genre,
                likes=sample_likes(avg_likes, source),
                item_seed=seed,
            )
        )
    return songs


def generate_detail(locale: Union[str, Locale, None], song_seed: int) -> SongDetail:
    lexicon = Lexicon(locale).reseed(normalize_item_seed(song_seed))
    paragraphs = lexicon.paragraphs(REVIEW_PARAGRAPHS)
    return SongDetail(review="\n\n".join(paragraphs), paragraphs=paragraphs)
