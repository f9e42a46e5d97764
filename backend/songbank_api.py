from fastapi import APIRouter, Query, HTTPException
from fastapi.responses import Response
import os
import logging

from models import (
    GenerationRequest, SongResponse, SongPageResponse, SongDetailResponse,
    MelodyResponse, LocaleResponse, LocaleListResponse,
)
from songbank.catalog import generate_page, generate_detail
from songbank.cover import cover_png
from songbank.locales import DEFAULT_LOCALE, supported_locales
from songbank.melody import generate_melody
from songbank.seeds import parse_item_seed, parse_user_seed
from services.playback import melody_midi_bytes, melody_wav_bytes

# Setup logging
logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = int(os.environ.get("SONGBANK_DEFAULT_PAGE_SIZE", "20"))
MAX_PAGE_SIZE = int(os.environ.get("SONGBANK_MAX_PAGE_SIZE", "100"))

songbank_router = APIRouter(prefix="/api")


def _item_seed_or_400(seed: str) -> int:
    try:
        return parse_item_seed(seed)
    except ValueError:
        logger.warning(f"Rejected song seed {seed!r}")
        raise HTTPException(status_code=400, detail="Song seed must be an integer")


@songbank_router.get("/songs", response_model=SongPageResponse)
async def get_songs(
    locale: str = DEFAULT_LOCALE.value,
    seed: str = "0",
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    avg_likes: float = Query(0.0, ge=0.0, allow_inf_nan=False, alias="avgLikes"),
):
    """
    Generate one page of songs. Same locale/seed/page/pageSize -> same songs
    (like counts excepted).
    """
    try:
        user_seed = parse_user_seed(seed)
    except ValueError:
        logger.warning(f"Rejected page query seed={seed!r}")
        raise HTTPException(status_code=400, detail="Seed must be an integer")

    request = GenerationRequest(
        locale=locale,
        seed=user_seed,
        page=page,
        pageSize=page_size,
        avgLikes=avg_likes,
    )

    songs = generate_page(
        request.locale,
        request.seed,
        request.page,
        request.page_size,
        request.avg_likes,
    )
    return SongPageResponse(
        songs=[SongResponse.from_summary(s) for s in songs],
        page=request.page,
        page_size=request.page_size,
    )


@songbank_router.get("/song/{seed}", response_model=SongDetailResponse)
async def get_song_detail(seed: str, locale: str = DEFAULT_LOCALE.value):
    """
    Review text for a single song, derived from its item seed.
    """
    song_seed = _item_seed_or_400(seed)
    return SongDetailResponse.from_detail(generate_detail(locale, song_seed))


@songbank_router.get("/song/{seed}/cover.png")
def get_song_cover(seed: str, title: str = "", artist: str = ""):
    """
    300x300 PNG cover for the given title/artist/item seed.
    """
    song_seed = _item_seed_or_400(seed)
    return Response(content=cover_png(title, artist, song_seed), media_type="image/png")


@songbank_router.get("/song/{seed}/melody", response_model=MelodyResponse)
async def get_song_melody(seed: str):
    song_seed = _item_seed_or_400(seed)
    return MelodyResponse.from_melody(generate_melody(song_seed))


@songbank_router.get("/song/{seed}/melody.wav")
def get_song_melody_wav(seed: str):
    song_seed = _item_seed_or_400(seed)
    wav = melody_wav_bytes(generate_melody(song_seed))
    return Response(content=wav, media_type="audio/wav")


@songbank_router.get("/song/{seed}/melody.mid")
def get_song_melody_midi(seed: str):
    song_seed = _item_seed_or_400(seed)
    midi = melody_midi_bytes(generate_melody(song_seed))
    return Response(
        content=midi,
        media_type="audio/midi",
        headers={"Content-Disposition": f'attachment; filename="song_{song_seed}.mid"'},
    )


@songbank_router.get("/locales", response_model=LocaleListResponse)
async def list_locales():
    """
    List the supported locales and their genre vocabularies.
    """
    return LocaleListResponse(
        locales=[LocaleResponse.from_profile(p) for p in supported_locales()],
        default=DEFAULT_LOCALE.value,
    )
