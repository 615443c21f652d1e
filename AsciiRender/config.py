import os

from .core.constants import (
    MIN_COLS,
    MAX_COLS,
    DEFAULT_COLS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_DPR,
    SAMPLING_METRICS_STRATEGY,
)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_number(name: str, default, cast=int):
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


# ================= Grid =================
ASCII_MIN_COLS = _env_number("ASCII_MIN_COLS", MIN_COLS)
ASCII_MAX_COLS = max(ASCII_MIN_COLS, _env_number("ASCII_MAX_COLS", MAX_COLS))
ASCII_DEFAULT_COLS = _env_number("ASCII_DEFAULT_COLS", DEFAULT_COLS)

# ================= Fonts =================
ASCII_FONT_FAMILY = os.getenv("ASCII_FONT_FAMILY", DEFAULT_FONT_FAMILY).strip() or DEFAULT_FONT_FAMILY
ASCII_FONT_SIZE = _env_number("ASCII_FONT_SIZE", DEFAULT_FONT_SIZE, float)
# Display size may differ from the sampling size
ASCII_DISPLAY_FONT_SIZE = _env_number("ASCII_DISPLAY_FONT_SIZE", ASCII_FONT_SIZE, float)
# "advance" (cells as rendered) or "bbox" (ink box of the glyph)
ASCII_METRICS_STRATEGY = os.getenv("ASCII_METRICS_STRATEGY", SAMPLING_METRICS_STRATEGY).strip().lower()

# ================= Output =================
ASCII_DPR = _env_number("ASCII_DPR", DEFAULT_DPR, float)

# ================= Input policy =================
# Fully transparent cells become blank instead of sampling as black
ASCII_TRANSPARENT_BLANK = _env_bool("ASCII_TRANSPARENT_BLANK", False)
# Decode truncated image files best-effort instead of failing
ASCII_ALLOW_TRUNCATED = _env_bool("ASCII_ALLOW_TRUNCATED", False)
