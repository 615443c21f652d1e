# Charset mapping module

import math
from typing import List

import numpy as np

from .constants import CHARSET


def ramp_index(gray: float, n: int = len(CHARSET)) -> int:
    """Ramp position for a grayscale value: 0 for black, n - 1 for white."""
    idx = math.floor((gray / 255) * (n - 1))
    return max(0, min(n - 1, idx))


def map_gray_to_char(gray: float, charset: str = CHARSET) -> str:
    """Darker input selects a denser glyph; 0 -> charset[0], 255 -> charset[-1]."""
    return charset[ramp_index(gray, len(charset))]


def grid_to_rows(gray_grid: np.ndarray, charset: str = CHARSET) -> List[str]:
    """
    Map a (rows, cols) grayscale grid to row strings.

    Every row has exactly `cols` characters; nothing is trimmed here.
    """
    n = len(charset)
    indices = np.floor((np.asarray(gray_grid, dtype=np.float64) / 255) * (n - 1))
    indices = np.clip(indices, 0, n - 1).astype(np.intp)
    glyphs = np.array(list(charset))
    return ["".join(row) for row in glyphs[indices]]
