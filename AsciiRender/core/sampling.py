# Luminance sampling module

import numpy as np
from PIL import Image as PIL_Image

from .constants import LUMA_WEIGHTS


def resample_to_grid(image: PIL_Image.Image, cols: int, rows: int) -> PIL_Image.Image:
    """Area-resample `image` down to exactly cols x rows RGBA samples."""
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    return rgba.resize((cols, rows), PIL_Image.Resampling.BOX)


def luminance(rgb: np.ndarray) -> np.ndarray:
    """
    BT.601 luminance of an (..., 3) uint8 array, as float64 in [0, 255].

    Computed in integer thousandths so that pure white is exactly 255.
    """
    wr, wg, wb = LUMA_WEIGHTS
    rgb = rgb.astype(np.int64)
    weighted = wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]
    return weighted / 1000.0


def sample_luminance(
    image: PIL_Image.Image,
    cols: int,
    rows: int,
    transparent_blank: bool = False,
) -> np.ndarray:
    """
    Downsample an image to the character grid and convert it to grayscale.

    Args:
        image: Source image (any mode), left unmodified
        cols: Grid columns
        rows: Grid rows
        transparent_blank: Force cells whose resampled alpha is 0 to 255
            (blank). When False alpha is ignored; fully transparent regions
            sample as black because resampling premultiplies alpha.

    Returns:
        float array of shape (rows, cols) with values in [0, 255]
    """
    small = resample_to_grid(image, cols, rows)
    pixels = np.asarray(small, dtype=np.uint8)
    gray = luminance(pixels[..., :3])

    if transparent_blank:
        gray = np.where(pixels[..., 3] == 0, 255.0, gray)

    return gray
