# Core rendering module

import math
import logging
from dataclasses import dataclass
from typing import Union

from PIL import Image as PIL_Image, ImageDraw

from .constants import (
    DEFAULT_BG_COLOR,
    DEFAULT_TEXT_COLOR,
    DEFAULT_DPR,
    CSS_DPI,
    LAYOUT_METRICS_STRATEGY,
)
from .fonts import get_font
from .layout import round_half_up, clamp_dpr, analyze_text_structure
from .metrics import probe_glyph_metrics
from .text_processing import AsciiArtifact

logger = logging.getLogger(__name__)


@dataclass
class RenderSurface:
    """A rendered raster and its logical (CSS) and physical sizes."""

    image: PIL_Image.Image
    css_width: float
    css_height: float
    dpr: float = DEFAULT_DPR

    @property
    def physical_width(self) -> int:
        return self.image.width

    @property
    def physical_height(self) -> int:
        return self.image.height


def physical_size(css_width: float, css_height: float, dpr: float):
    """Device-pixel size of a css_width x css_height surface."""
    return (
        max(1, round_half_up(css_width * dpr)),
        max(1, round_half_up(css_height * dpr)),
    )


def _empty_surface(bg_color: str, dpr: float) -> RenderSurface:
    logger.debug("Nothing to render, returning 1x1 surface")
    img = PIL_Image.new("RGB", (1, 1), color=bg_color)
    img.info["dpi"] = (CSS_DPI * dpr, CSS_DPI * dpr)
    # One device pixel, so physical == round(css * dpr) still holds
    return RenderSurface(image=img, css_width=1 / dpr, css_height=1 / dpr, dpr=dpr)


def ascii_to_image(
    artifact: Union[AsciiArtifact, str],
    font_family: str = None,
    font_size: float = 12,
    dpr: float = DEFAULT_DPR,
    bg_color: str = DEFAULT_BG_COLOR,
    text_color: str = DEFAULT_TEXT_COLOR,
    antialias: bool = True,
) -> RenderSurface:
    """
    Render ASCII art text onto a device-pixel-exact surface.

    Args:
        artifact: AsciiArtifact or plain text to draw
        font_family: Display font family name or font file path
        font_size: Display font size in logical pixels
        dpr: Device pixel ratio; drawing is scaled by it
        bg_color: Background color
        text_color: Glyph color
        antialias: When False, glyphs are drawn bilevel so the surface only
            holds bg_color and text_color

    Returns:
        RenderSurface. Empty text gives a 1x1 background surface.
    """
    text = artifact.text if isinstance(artifact, AsciiArtifact) else artifact
    dpr = clamp_dpr(dpr)

    structure = analyze_text_structure(text)
    if structure["num_lines"] == 0 or structure["max_line_chars"] == 0:
        return _empty_surface(bg_color, dpr)

    # Display-size metrics, independent of the sampling-size probe
    glyph = probe_glyph_metrics(font_family, font_size, LAYOUT_METRICS_STRATEGY)
    css_width = structure["max_line_chars"] * glyph.width
    css_height = structure["num_lines"] * glyph.height
    width, height = physical_size(css_width, css_height, dpr)

    img = PIL_Image.new("RGB", (width, height), color=bg_color)
    draw = ImageDraw.Draw(img)
    if not antialias:
        draw.fontmode = "1"
    draw.rectangle((0, 0, width, height), fill=bg_color)

    layout_font = get_font(font_size, font_family)
    device_font = get_font(font_size * dpr, font_family)

    for row, line in enumerate(text.split("\n")):
        if not line:
            continue
        # Measured width, not chars * glyph width
        line_px = math.ceil(draw.textlength(line, font=layout_font))
        x = round_half_up((css_width - line_px) / 2)
        y = row * glyph.height
        # Default "la" anchor: left, ascender (top-aligned)
        draw.text((x * dpr, y * dpr), line, font=device_font, fill=text_color)

    img.info["dpi"] = (CSS_DPI * dpr, CSS_DPI * dpr)
    return RenderSurface(image=img, css_width=css_width, css_height=css_height, dpr=dpr)
