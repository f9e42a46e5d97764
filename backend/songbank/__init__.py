"""
Procedural Song Bank
====================
Deterministic generation of an endless, paginated catalogue of fictitious
songs from (locale, user seed, page, page size). Nothing is stored: every
title, review, cover and melody is rebuilt from its seed on demand.

Modules:
- rng.py: Mulberry32 seeded PRNG shared bit-for-bit with the browser client
- seeds.py: 64-bit user seed + page -> page seed -> per-item seed
- locales.py: supported locales, genre lists and word lists
- lexicon.py: Faker-backed names, words and filler prose per locale
- catalog.py: song pages and review text
- cover.py: procedural cover art (Pillow)
- melody.py: 16-note melodies over three fixed scales
- cli.py: command line access to all of the above
"""

__version__ = "1.0.0"

from .catalog import SongDetail, SongSummary, generate_detail, generate_page
from .cover import CoverPlan, plan_cover, render_cover
from .locales import DEFAULT_LOCALE, Locale
from .melody import Melody, Note, generate_melody
from .rng import Mulberry32, make_rng
from .seeds import item_seed, page_seed
