# Constants definition

CHARSET = "@#%*+=-:. "  # Dark -> light, index 0 is the densest glyph
PROBE_CHAR = CHARSET[0]  # Representative glyph for metrics

DEFAULT_COLS = 100
MIN_COLS = 10
MAX_COLS = 600
DEFAULT_FONT_FAMILY = "monospace"
DEFAULT_FONT_SIZE = 12
DEFAULT_DPR = 1.0
CSS_DPI = 96  # Logical pixels per inch

# Bounding-box glyph probe
REFERENCE_FONT_SIZE = 140
PROBE_PADDING = 20
INK_THRESHOLD = 10  # Pixel values above this count as ink

METRICS_STRATEGIES = ("bbox", "advance")
DEFAULT_METRICS_STRATEGY = "bbox"
LAYOUT_METRICS_STRATEGY = "advance"  # Cell shape the renderer draws
SAMPLING_METRICS_STRATEGY = LAYOUT_METRICS_STRATEGY  # Rows must match the rendered cells

# BT.601 luma weights, in thousandths
LUMA_WEIGHTS = (299, 587, 114)

DEFAULT_BG_COLOR = "black"
DEFAULT_TEXT_COLOR = "white"
