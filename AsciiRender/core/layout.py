# Layout module

import math

from .constants import MIN_COLS, MAX_COLS, DEFAULT_COLS, DEFAULT_DPR


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (browser Math.round)."""
    return int(math.floor(value + 0.5))


def clamp_cols(
    value,
    min_cols: int = MIN_COLS,
    max_cols: int = MAX_COLS,
    default: int = DEFAULT_COLS,
) -> int:
    """
    Normalize a requested column count into [min_cols, max_cols].

    Unparsable input (None, empty or non-numeric strings, NaN) uses `default`.
    """
    try:
        cols = int(float(value))
    except (TypeError, ValueError, OverflowError):
        cols = default
    return max(min_cols, min(max_cols, cols))


def clamp_dpr(value, default: float = DEFAULT_DPR) -> float:
    """Device pixel ratio must be a positive finite number."""
    try:
        dpr = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(dpr) or dpr <= 0:
        return default
    return dpr


def resolve_rows(cols: int, image_width: int, image_height: int, glyph_aspect: float) -> int:
    """
    Pick the row count that keeps the source proportions for `cols` columns.

    A character cell is `glyph_aspect` (width / height) as wide as it is
    tall, so the row count is scaled by it:

        rows = max(1, round(cols * glyph_aspect * image_height / image_width))
    """
    if image_width <= 0 or image_height <= 0:
        return 1
    return max(1, round_half_up(cols * glyph_aspect * (image_height / image_width)))


def analyze_text_structure(text: str) -> dict:
    """
    Analyze text structure.

    Returns:
        {'num_lines': int, 'max_line_chars': int, 'avg_line_chars': float}
    """
    lines = text.split("\n") if text else []
    num_lines = len(lines)
    line_lengths = [len(line) for line in lines]
    max_line_chars = max(line_lengths) if line_lengths else 0
    avg_line_chars = sum(line_lengths) / num_lines if num_lines > 0 else 0

    return {
        "num_lines": num_lines,
        "max_line_chars": max_line_chars,
        "avg_line_chars": avg_line_chars,
    }
