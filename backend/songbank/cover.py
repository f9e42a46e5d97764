"""
Procedural cover art.

``plan_cover`` performs every PRNG draw for a cover and returns them as plain
values; ``render_cover`` rasterizes a plan with Pillow. The draw order is part
of the reproducibility contract: hue1, hue2, then x, y, r, lightness for each
of the 20 circles in turn.
"""

import colorsys
import io
import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .rng import make_rng

logger = logging.getLogger(__name__)

COVER_SIZE = 300
CIRCLE_COUNT = 20
CIRCLE_ALPHA = 0.3
BAND_TOP = 200
BAND_MAX_ALPHA = 0.9
TITLE_MAX_CHARS = 18
ARTIST_MAX_CHARS = 20
TITLE_FONT_SIZE = 20
ARTIST_FONT_SIZE = 16
TITLE_COLOR = (255, 255, 255)
ARTIST_COLOR = (204, 204, 204)

_BOLD_FONT_CANDIDATES = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf")
_REGULAR_FONT_CANDIDATES = ("DejaVuSans.ttf", "Arial.ttf", "arial.ttf")


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    r: float
    lightness: float


@dataclass(frozen=True)
class CoverPlan:
    hue1: int
    hue2: int
    circles: Tuple[Circle, ...]


def truncate_text(text: str, max_length: int) -> str:
    return text[:max_length] + "..." if len(text) > max_length else text


def plan_cover(item_seed: int) -> CoverPlan:
    """All draws in 300x300 logical units."""
    rng = make_rng(item_seed)
    hue1 = int(rng() * 360)
    hue2 = (hue1 + 60 + int(rng() * 120)) % 360

    circles = []
    for _ in range(CIRCLE_COUNT):
        x = rng() * COVER_SIZE
        y = rng() * COVER_SIZE
        r = rng() * 50 + 10
        lightness = 30 + rng() * 40
        circles.append(Circle(x=x, y=y, r=r, lightness=lightness))
    return CoverPlan(hue1=hue1, hue2=hue2, circles=tuple(circles))


def _hsl(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """hue in degrees, saturation/lightness in percent."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness / 100.0, saturation / 100.0)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def _diagonal_gradient(size: int, start: Tuple[int, int, int], end: Tuple[int, int, int]) -> Image.Image:
    # Projection of each pixel centre onto the (0,0)->(size,size) diagonal.
    coords = np.arange(size, dtype=np.float32) + 0.5
    t = (coords[None, :] + coords[:, None]) / float(2 * size)
    t = np.clip(t, 0.0, 1.0)[..., None]
    a = np.array(start, dtype=np.float32)
    b = np.array(end, dtype=np.float32)
    rgb = a + (b - a) * t
    pixels = np.clip(np.round(rgb), 0, 255).astype(np.uint8)
    return Image.fromarray(pixels, "RGB").convert("RGBA")


def _bottom_band(size: int) -> Image.Image:
    top = int(size * BAND_TOP / COVER_SIZE)
    band = np.zeros((size, size, 4), dtype=np.uint8)
    rows = size - top
    if rows > 0:
        ramp = (np.arange(rows, dtype=np.float32) + 0.5) / float(rows)
        band[top:, :, 3] = np.round(ramp * BAND_MAX_ALPHA * 255).astype(np.uint8)[:, None]
    return Image.fromarray(band, "RGBA")


def _load_font(size: int, bold: bool, font_path: Optional[str] = None):
    candidates: List[str] = []
    if font_path:
        candidates.append(font_path)
    env_path = os.getenv("SONGBANK_FONT_PATH")
    if env_path:
        candidates.append(env_path)
    candidates.extend(_BOLD_FONT_CANDIDATES if bold else _REGULAR_FONT_CANDIDATES)

    for candidate in candidates:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    logger.debug(f"No TrueType font found for cover text, using Pillow default at {size}px")
    return ImageFont.load_default(size=size)


def render_cover(
    title: str,
    artist: str,
    item_seed: int,
    size: int = COVER_SIZE,
    font_path: Optional[str] = None,
) -> Image.Image:
    plan = plan_cover(item_seed)
    scale = size / float(COVER_SIZE)

    img = _diagonal_gradient(size, _hsl(plan.hue1, 70, 50), _hsl(plan.hue2, 70, 30))

    alpha = int(round(CIRCLE_ALPHA * 255))
    for circle in plan.circles:
        overlay = Image.new("RGBA", img.size, (0, 0, 0, 0))
        r, g, b = _hsl(plan.hue1, 50, circle.lightness)
        cx, cy, radius = circle.x * scale, circle.y * scale, circle.r * scale
        ImageDraw.Draw(overlay).ellipse(
            [cx - radius, cy - radius, cx + radius, cy + radius],
            fill=(r, g, b, alpha),
        )
        img = Image.alpha_composite(img, overlay)

    img = Image.alpha_composite(img, _bottom_band(size))

    draw = ImageDraw.Draw(img)
    if title:
        draw.text(
            (15 * scale, 250 * scale),
            truncate_text(title, TITLE_MAX_CHARS),
            fill=TITLE_COLOR,
            font=_load_font(max(1, int(TITLE_FONT_SIZE * scale)), bold=True, font_path=font_path),
            anchor="ls",
        )
    if artist:
        draw.text(
            (15 * scale, 275 * scale),
            truncate_text(artist, ARTIST_MAX_CHARS),
            fill=ARTIST_COLOR,
            font=_load_font(max(1, int(ARTIST_FONT_SIZE * scale)), bold=False, font_path=font_path),
            anchor="ls",
        )
    return img.convert("RGB")


def cover_png(title: str, artist: str, item_seed: int, size: int = COVER_SIZE) -> bytes:
    buffer = io.BytesIO()
    render_cover(title, artist, item_seed, size=size).save(buffer, format="PNG")
    return buffer.getvalue()
