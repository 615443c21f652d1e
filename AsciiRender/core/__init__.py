# AsciiRender Core Module
# Image -> ASCII text -> raster conversion pipeline

from .constants import (
    CHARSET,
    DEFAULT_COLS,
    MIN_COLS,
    MAX_COLS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_DPR,
    REFERENCE_FONT_SIZE,
    INK_THRESHOLD,
)
from .errors import AsciiRenderError, MissingImageError, ImageDecodeError
from .fonts import get_font
from .layout import (
    round_half_up,
    clamp_cols,
    clamp_dpr,
    resolve_rows,
    analyze_text_structure,
)
from .metrics import GlyphMetrics, measure_advance, measure_bbox, probe_glyph_metrics
from .sampling import resample_to_grid, luminance, sample_luminance
from .charset import ramp_index, map_gray_to_char, grid_to_rows
from .text_processing import AsciiArtifact, trim_trailing_whitespace, compose_text
from .rendering import RenderSurface, physical_size, ascii_to_image

__all__ = [
    # Constants
    "CHARSET",
    "DEFAULT_COLS",
    "MIN_COLS",
    "MAX_COLS",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_DPR",
    "REFERENCE_FONT_SIZE",
    "INK_THRESHOLD",
    # Errors
    "AsciiRenderError",
    "MissingImageError",
    "ImageDecodeError",
    # Fonts
    "get_font",
    # Layout
    "round_half_up",
    "clamp_cols",
    "clamp_dpr",
    "resolve_rows",
    "analyze_text_structure",
    # Glyph metrics
    "GlyphMetrics",
    "measure_advance",
    "measure_bbox",
    "probe_glyph_metrics",
    # Sampling
    "resample_to_grid",
    "luminance",
    "sample_luminance",
    # Charset
    "ramp_index",
    "map_gray_to_char",
    "grid_to_rows",
    # Text composition
    "AsciiArtifact",
    "trim_trailing_whitespace",
    "compose_text",
    # Rendering
    "RenderSurface",
    "physical_size",
    "ascii_to_image",
]
