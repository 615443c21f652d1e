# Text composition module

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .metrics import GlyphMetrics


@dataclass(frozen=True)
class AsciiArtifact:
    """Trimmed ASCII art text and the grid it was sampled on."""

    text: str
    cols: int
    rows: int
    font_family: Optional[str] = None
    font_size: Optional[float] = None
    glyph: Optional[GlyphMetrics] = field(default=None, compare=False)

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n") if self.text else []


def trim_trailing_whitespace(text: str) -> str:
    """Strip trailing whitespace from every line. Idempotent."""
    return "\n".join(line.rstrip() for line in text.split("\n"))


def compose_text(rows: Sequence[str], drop_blank_tail: bool = False) -> str:
    """
    Join grid rows into the canonical text.

    Args:
        rows: Row strings, top to bottom
        drop_blank_tail: Drop rows that are empty after trimming from the end

    Returns:
        Newline-joined rows with trailing whitespace removed per row
    """
    lines = [row.rstrip() for row in rows]
    if drop_blank_tail:
        while lines and not lines[-1]:
            lines.pop()
    return "\n".join(lines)
