"""
Shared test fixtures for the AsciiRender test suite.

All images are synthesized in memory with Pillow so the tests never depend
on files outside the repository.
"""

import io

import numpy as np
import pytest
from PIL import Image

from AsciiRender.core import probe_glyph_metrics, get_font


@pytest.fixture
def solid_image():
    """Factory for solid-color images."""

    def _make(color, size=(2, 2), mode="RGB"):
        return Image.new(mode, size, color=color)

    return _make


@pytest.fixture
def gradient_image():
    """Horizontal black-to-white gradient, 256 x 64."""
    row = np.linspace(0, 255, 256, dtype=np.uint8)
    gray = np.tile(row, (64, 1))
    return Image.fromarray(gray).convert("RGB")


@pytest.fixture
def png_bytes():
    """Factory encoding an image as PNG bytes."""

    def _encode(img):
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()

    return _encode


@pytest.fixture
def fresh_metrics_cache():
    """Clear memoized glyph metrics and fonts around a test."""
    probe_glyph_metrics.cache_clear()
    get_font.cache_clear()
    yield
    probe_glyph_metrics.cache_clear()
    get_font.cache_clear()
