# Glyph metrics module

import math
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from PIL import Image as PIL_Image, ImageDraw

from .constants import (
    PROBE_CHAR,
    REFERENCE_FONT_SIZE,
    PROBE_PADDING,
    INK_THRESHOLD,
    METRICS_STRATEGIES,
    DEFAULT_METRICS_STRATEGY,
)
from .fonts import get_font
from .layout import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphMetrics:
    """Pixel footprint of one glyph cell."""

    width: int
    height: int
    strategy: str = DEFAULT_METRICS_STRATEGY

    @property
    def aspect(self) -> float:
        return self.width / self.height


def measure_advance(font_family: str, font_size: float, char: str = PROBE_CHAR) -> GlyphMetrics:
    """
    Measure a glyph by its horizontal advance.

    Height is taken as the font size, which holds for monospace text drawn
    with a top-aligned baseline.
    """
    font = get_font(font_size, font_family)
    temp_draw = ImageDraw.Draw(PIL_Image.new("L", (1, 1)))
    advance = temp_draw.textlength(char, font=font)
    return GlyphMetrics(
        width=max(1, math.ceil(advance)),
        height=max(1, math.ceil(font_size)),
        strategy="advance",
    )


def _ink_bbox(font, char: str) -> Optional[Tuple[int, int, int, int]]:
    """Draw `char` alone on a scratch image and return the bbox of its ink pixels."""
    temp_draw = ImageDraw.Draw(PIL_Image.new("L", (1, 1)))
    advance = temp_draw.textlength(char, font=font)
    width = math.ceil(max(advance, REFERENCE_FONT_SIZE)) + 2 * PROBE_PADDING
    height = math.ceil(REFERENCE_FONT_SIZE * 1.5) + 2 * PROBE_PADDING

    scratch = PIL_Image.new("L", (width, height), color=0)
    ImageDraw.Draw(scratch).text((PROBE_PADDING, PROBE_PADDING), char, font=font, fill=255)

    mask = scratch.point(lambda p: 255 if p > INK_THRESHOLD else 0)
    return mask.getbbox()


def measure_bbox(font_family: str, font_size: float, char: str = PROBE_CHAR) -> Optional[GlyphMetrics]:
    """
    Measure the tight ink bounding box of a glyph.

    The glyph is rasterized at REFERENCE_FONT_SIZE and the box scaled to
    `font_size`. Returns None when the glyph renders no ink.
    """
    font = get_font(REFERENCE_FONT_SIZE, font_family)
    bbox = _ink_bbox(font, char)
    if bbox is None:
        return None

    left, top, right, bottom = bbox
    scale = font_size / REFERENCE_FONT_SIZE
    return GlyphMetrics(
        width=max(1, round_half_up((right - left) * scale)),
        height=max(1, round_half_up((bottom - top) * scale)),
        strategy="bbox",
    )


@lru_cache(maxsize=128)
def probe_glyph_metrics(
    font_family: str,
    font_size: float,
    strategy: str = DEFAULT_METRICS_STRATEGY,
) -> GlyphMetrics:
    """
    Get glyph metrics for the densest charset glyph.

    Args:
        font_family: Font family name or font file path
        font_size: Font size in pixels
        strategy: "bbox" (ink bounding box, falling back to advance when the
            glyph renders empty) or "advance"

    Returns:
        GlyphMetrics with width and height >= 1
    """
    if strategy not in METRICS_STRATEGIES:
        raise ValueError(f"Unknown metrics strategy: {strategy!r}")

    if strategy == "bbox":
        metrics = measure_bbox(font_family, font_size)
        if metrics is not None:
            return metrics
        logger.warning(
            "Glyph %r rendered no ink in font %r, falling back to advance width",
            PROBE_CHAR, font_family,
        )

    return measure_advance(font_family, font_size)
