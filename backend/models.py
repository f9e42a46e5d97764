from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List

from songbank.catalog import SongDetail, SongSummary
from songbank.locales import Locale, LocaleProfile
from songbank.melody import Melody
from songbank.seeds import normalize_user_seed

# Request Models
class GenerationRequest(BaseModel):
    """Boundary-validated page query. Unknown locales fall back to en-US."""
    model_config = ConfigDict(populate_by_name=True)
    locale: Locale = Locale.EN_US
    seed: int = 0
    page: int = Field(1, ge=1)
    page_size: int = Field(20, ge=1, alias="pageSize")
    avg_likes: float = Field(0.0, ge=0.0, allow_inf_nan=False, alias="avgLikes")

    @field_validator("locale", mode="before")
    @classmethod
    def _resolve_locale(cls, value):
        return Locale.resolve(value)

    @field_validator("seed", mode="after")
    @classmethod
    def _wrap_seed(cls, value: int) -> int:
        return normalize_user_seed(value)

# Response Models
class SongResponse(BaseModel):
    index: int
    title: str
    artist: str
    album: str
    genre: str
    likes: int
    seed: int

    @classmethod
    def from_summary(cls, song: SongSummary) -> "SongResponse":
        return cls(
            index=song.index,
            title=song.title,
            artist=song.artist,
            album=song.album,
            genre=song.genre,
            likes=song.likes,
            seed=song.item_seed,
        )

class SongPageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    songs: List[SongResponse]
    page: int
    page_size: int = Field(alias="pageSize")

class SongDetailResponse(BaseModel):
    review: str
    paragraphs: List[str]

    @classmethod
    def from_detail(cls, detail: SongDetail) -> "SongDetailResponse":
        return cls(review=detail.review, paragraphs=list(detail.paragraphs))

class NoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    pitch: str
    start_time: float = Field(alias="startTime")
    duration: float

class MelodyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    scale: str
    notes: List[NoteResponse]
    total_duration: float = Field(alias="totalDuration")

    @classmethod
    def from_melody(cls, melody: Melody) -> "MelodyResponse":
        return cls(
            scale=melody.scale,
            notes=[
                NoteResponse(pitch=n.pitch, start_time=n.start_time, duration=n.duration)
                for n in melody.notes
            ],
            total_duration=melody.total_duration,
        )

class LocaleResponse(BaseModel):
    code: str
    name: str
    genres: List[str]

    @classmethod
    def from_profile(cls, profile: LocaleProfile) -> "LocaleResponse":
        return cls(code=profile.locale.value, name=profile.display_name, genres=list(profile.genres))

class LocaleListResponse(BaseModel):
    locales: List[LocaleResponse]
    default: str
