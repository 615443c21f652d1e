# AsciiRender Simplified API

import io
import logging
from pathlib import Path
from threading import Lock
from typing import Dict, Optional, Tuple, Union

import numpy as np
from PIL import Image as PIL_Image, ImageFile, UnidentifiedImageError

from . import config
from .core import (
    AsciiArtifact,
    RenderSurface,
    MissingImageError,
    ImageDecodeError,
    clamp_cols,
    resolve_rows,
    probe_glyph_metrics,
    sample_luminance,
    grid_to_rows,
    compose_text,
    ascii_to_image,
)
from .core.constants import LAYOUT_METRICS_STRATEGY

logger = logging.getLogger(__name__)

ImageSource = Union[PIL_Image.Image, str, Path, bytes, io.IOBase]

# Guards the process-wide ImageFile.LOAD_TRUNCATED_IMAGES flag
_decode_lock = Lock()


def load_image(source: Optional[ImageSource], allow_truncated: bool = None) -> PIL_Image.Image:
    """
    Open and fully decode a source image.

    Args:
        source: PIL image, file path, raw bytes or binary file object
        allow_truncated: Decode truncated files best-effort; defaults to
            config.ASCII_ALLOW_TRUNCATED

    Raises:
        MissingImageError: No source, or the path does not exist
        ImageDecodeError: The data is not a decodable image
    """
    if source is None:
        raise MissingImageError("Please choose an image file.")
    if isinstance(source, PIL_Image.Image):
        return source
    if allow_truncated is None:
        allow_truncated = config.ASCII_ALLOW_TRUNCATED

    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise MissingImageError(f"File not found: {source}")
        fp = path
    elif isinstance(source, (bytes, bytearray)):
        if not source:
            raise MissingImageError("Image data is empty.")
        fp = io.BytesIO(source)
    else:
        fp = source

    with _decode_lock:
        previous = ImageFile.LOAD_TRUNCATED_IMAGES
        ImageFile.LOAD_TRUNCATED_IMAGES = bool(allow_truncated)
        try:
            img = PIL_Image.open(fp)
            img.load()
        except UnidentifiedImageError as e:
            raise ImageDecodeError(f"Unsupported or corrupt image: {e}") from e
        except (OSError, SyntaxError) as e:
            raise ImageDecodeError(f"Could not decode image: {e}") from e
        finally:
            ImageFile.LOAD_TRUNCATED_IMAGES = previous
    return img


def convert_image_to_ascii(
    image: ImageSource,
    cols=None,
    font_family: str = None,
    font_size: float = None,
    rows: int = None,
    transparent_blank: bool = None,
    strategy: str = None,
    min_cols: int = None,
    max_cols: int = None,
    drop_blank_tail: bool = False,
) -> AsciiArtifact:
    """
    Convert an image to ASCII art text.

    Args:
        image: Source image (see load_image)
        cols: Requested columns, clamped to [min_cols, max_cols]
        font_family: Font the art will be shown in
        font_size: Font size used to measure the glyph aspect for sampling
        rows: Explicit row count; None derives it from the glyph aspect
        transparent_blank: Fully transparent cells become blank
        strategy: Glyph metrics strategy ("bbox" or "advance")
        min_cols: Lower column bound, default config.ASCII_MIN_COLS
        max_cols: Upper column bound, default config.ASCII_MAX_COLS
        drop_blank_tail: Drop empty trailing rows from the text

    Returns:
        AsciiArtifact
    """
    img = load_image(image)

    if font_family is None:
        font_family = config.ASCII_FONT_FAMILY
    if font_size is None or font_size <= 0:
        font_size = config.ASCII_FONT_SIZE
    if transparent_blank is None:
        transparent_blank = config.ASCII_TRANSPARENT_BLANK
    if strategy is None:
        strategy = config.ASCII_METRICS_STRATEGY
    min_cols = config.ASCII_MIN_COLS if min_cols is None else min_cols
    max_cols = config.ASCII_MAX_COLS if max_cols is None else max_cols

    cols = clamp_cols(cols, min_cols, max_cols, default=config.ASCII_DEFAULT_COLS)
    glyph = probe_glyph_metrics(font_family, font_size, strategy)
    if rows is None:
        rows = resolve_rows(cols, img.width, img.height, glyph.aspect)
    else:
        rows = max(1, int(rows))

    if img.width == 0 or img.height == 0:
        logger.warning("Source image has zero area, producing a blank grid")
        gray = np.full((rows, cols), 255.0)
    else:
        gray = sample_luminance(img, cols, rows, transparent_blank=transparent_blank)

    text = compose_text(grid_to_rows(gray), drop_blank_tail=drop_blank_tail)
    return AsciiArtifact(
        text=text,
        cols=cols,
        rows=rows,
        font_family=font_family,
        font_size=font_size,
        glyph=glyph,
    )


def render_ascii_to_image(
    artifact: Union[AsciiArtifact, str],
    font_family: str = None,
    font_size: float = None,
    dpr: float = None,
    **kwargs,
) -> RenderSurface:
    """
    Render an artifact to a raster surface.

    Font family and size default to the ones the artifact was sampled with.
    Extra keyword arguments go to core.ascii_to_image.
    """
    if isinstance(artifact, AsciiArtifact):
        font_family = font_family or artifact.font_family
        font_size = font_size or artifact.font_size
    if font_family is None:
        font_family = config.ASCII_FONT_FAMILY
    if font_size is None or font_size <= 0:
        font_size = config.ASCII_DISPLAY_FONT_SIZE
    if dpr is None:
        dpr = config.ASCII_DPR

    return ascii_to_image(artifact, font_family=font_family, font_size=font_size, dpr=dpr, **kwargs)


def convert_and_render(
    image: ImageSource,
    cols=None,
    font_family: str = None,
    font_size: float = None,
    display_font_size: float = None,
    dpr: float = None,
    render_options: Dict = None,
    **kwargs,
) -> Tuple[AsciiArtifact, RenderSurface]:
    """
    Run the full pipeline: image -> artifact -> surface.

    render_options (antialias, bg_color, text_color) go to
    core.ascii_to_image; extra keyword arguments go to convert_image_to_ascii.
    """
    artifact = convert_image_to_ascii(
        image, cols=cols, font_family=font_family, font_size=font_size, **kwargs
    )
    surface = render_ascii_to_image(
        artifact,
        font_family=artifact.font_family,
        font_size=display_font_size or artifact.font_size,
        dpr=dpr,
        **(render_options or {}),
    )
    return artifact, surface


def preview_style(font_family: str = None, font_size: float = None) -> Dict[str, str]:
    """CSS properties a text preview needs to line up with the rendered raster."""
    font_family = font_family or config.ASCII_FONT_FAMILY
    font_size = font_size or config.ASCII_DISPLAY_FONT_SIZE
    glyph = probe_glyph_metrics(font_family, font_size, LAYOUT_METRICS_STRATEGY)
    return {
        "font-family": f"{font_family}, monospace",
        "font-size": f"{font_size:g}px",
        "line-height": f"{glyph.height}px",
    }


def save_text(artifact: Union[AsciiArtifact, str], path) -> Path:
    """Write the artifact text verbatim as UTF-8."""
    text = artifact.text if isinstance(artifact, AsciiArtifact) else artifact
    path = Path(path)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    return path


def save_png(surface: RenderSurface, path) -> Path:
    """Write the surface as a lossless PNG."""
    path = Path(path)
    dpi = surface.image.info.get("dpi")
    if dpi:
        surface.image.save(path, format="PNG", dpi=dpi)
    else:
        surface.image.save(path, format="PNG")
    return path


class ConversionSession:
    """
    Holds the most recent conversion result.

    Each request takes a generation number; a result that finishes after a
    newer request was issued is returned to its caller but not published.
    """

    def __init__(self, **defaults):
        self.defaults = defaults
        self.last_artifact: Optional[AsciiArtifact] = None
        self.last_surface: Optional[RenderSurface] = None
        self._generation = 0
        self._lock = Lock()

    @property
    def generation(self) -> int:
        return self._generation

    def convert(self, image: ImageSource, **kwargs) -> Tuple[AsciiArtifact, RenderSurface]:
        with self._lock:
            self._generation += 1
            generation = self._generation

        options = {**self.defaults, **kwargs}
        artifact, surface = convert_and_render(image, **options)

        with self._lock:
            if generation != self._generation:
                logger.info(
                    "Discarding stale conversion %d (latest is %d)", generation, self._generation
                )
            else:
                self.last_artifact = artifact
                self.last_surface = surface
        return artifact, surface
