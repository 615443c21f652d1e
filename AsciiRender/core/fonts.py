# Font handling module

import os
import logging
from functools import lru_cache

from PIL import ImageFont

logger = logging.getLogger(__name__)

GENERIC_MONOSPACE = {"monospace", "mono", "ui-monospace", "courier", "courier new"}

# System monospace fonts by priority
MONOSPACE_FONT_PATHS = [
    # Linux
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/truetype/ubuntu/UbuntuMono-R.ttf",
    "/usr/share/fonts/truetype/noto/NotoMono-Regular.ttf",
    # macOS
    "/System/Library/Fonts/Menlo.ttc",
    "/Library/Fonts/Courier New.ttf",
    # Windows
    "C:/Windows/Fonts/consola.ttf",
    "C:/Windows/Fonts/cour.ttf",
]


def _family_candidates(font_family: str):
    """Names to hand to Pillow's system font lookup for a family name."""
    name = font_family.strip().strip("'\"")
    candidates = [name]
    for alt in (name.replace(" ", ""), name.replace(" ", "-")):
        if alt not in candidates:
            candidates.append(alt)
    return candidates


@lru_cache(maxsize=64)
def get_font(font_size: float, font_family: str = None):
    """
    Get a font object for a family name or font file path.

    Args:
        font_size: Font size in pixels
        font_family: Font file path or family name; None or a generic
            family ("monospace") searches the system monospace fonts

    Returns:
        ImageFont object. Never raises for an unknown family: falls back to
        a system monospace font, then to Pillow's bundled default font.
    """
    if font_family and os.path.exists(font_family):
        return ImageFont.truetype(font_family, font_size)

    if font_family and font_family.strip().lower() not in GENERIC_MONOSPACE:
        for candidate in _family_candidates(font_family):
            try:
                return ImageFont.truetype(candidate, font_size)
            except OSError:
                continue
        logger.info("Font family %r not found, using monospace fallback", font_family)

    for path in MONOSPACE_FONT_PATHS:
        if os.path.exists(path):
            try:
                return ImageFont.truetype(path, font_size)
            except OSError:
                # If loading fails, try next one
                continue

    logger.debug("No system monospace font found, using Pillow default font")
    return ImageFont.load_default(size=font_size)
