# AsciiRender - Image to ASCII art conversion and raster export
#
# Simple usage:
#   from AsciiRender import convert_and_render
#
# CLI:
#   python -m AsciiRender.demo convert --file photo.jpg --cols 120 --txt art.txt --png art.png
#   python -m AsciiRender.demo render --file art.txt -o art.png --dpr 2

from .api import (
    load_image,
    convert_image_to_ascii,
    render_ascii_to_image,
    convert_and_render,
    preview_style,
    save_text,
    save_png,
    ConversionSession,
)
from .core import (
    AsciiArtifact,
    RenderSurface,
    GlyphMetrics,
    AsciiRenderError,
    MissingImageError,
    ImageDecodeError,
    probe_glyph_metrics,
    resolve_rows,
    sample_luminance,
    map_gray_to_char,
    compose_text,
    ascii_to_image,
    CHARSET,
    DEFAULT_COLS,
    MIN_COLS,
    MAX_COLS,
)

__version__ = "1.0.0"

__all__ = [
    # High-level API
    "load_image",
    "convert_image_to_ascii",
    "render_ascii_to_image",
    "convert_and_render",
    "preview_style",
    "save_text",
    "save_png",
    "ConversionSession",
    # Types
    "AsciiArtifact",
    "RenderSurface",
    "GlyphMetrics",
    # Errors
    "AsciiRenderError",
    "MissingImageError",
    "ImageDecodeError",
    # Core functions
    "probe_glyph_metrics",
    "resolve_rows",
    "sample_luminance",
    "map_gray_to_char",
    "compose_text",
    "ascii_to_image",
    # Constants
    "CHARSET",
    "DEFAULT_COLS",
    "MIN_COLS",
    "MAX_COLS",
]
