"""Tests for luminance sampling and charset mapping."""

import numpy as np
import pytest
from PIL import Image

from AsciiRender.core import (
    CHARSET,
    luminance,
    sample_luminance,
    ramp_index,
    map_gray_to_char,
    grid_to_rows,
)


# ---------------------------------------------------------------------------
# Luminance
# ---------------------------------------------------------------------------


class TestLuminance:
    def test_extremes_are_exact(self):
        px = np.array([[[0, 0, 0], [255, 255, 255]]], dtype=np.uint8)
        gray = luminance(px)
        assert gray[0, 0] == 0.0
        assert gray[0, 1] == 255.0

    def test_bt601_weights(self):
        px = np.array([[[255, 0, 0], [0, 255, 0], [0, 0, 255]]], dtype=np.uint8)
        gray = luminance(px)
        assert gray[0].tolist() == pytest.approx([76.245, 149.685, 29.07])

    def test_green_brighter_than_blue(self):
        px = np.array([[[0, 200, 0], [0, 0, 200]]], dtype=np.uint8)
        gray = luminance(px)
        assert gray[0, 0] > gray[0, 1]


class TestSampleLuminance:
    def test_shape(self, gradient_image):
        gray = sample_luminance(gradient_image, 40, 7)
        assert gray.shape == (7, 40)

    def test_range(self, gradient_image):
        gray = sample_luminance(gradient_image, 64, 8)
        assert gray.min() >= 0
        assert gray.max() <= 255

    def test_gradient_increases_left_to_right(self, gradient_image):
        gray = sample_luminance(gradient_image, 16, 2)
        assert np.all(np.diff(gray[0]) > 0)

    def test_solid_colors(self, solid_image):
        assert np.all(sample_luminance(solid_image("black", (8, 8)), 4, 4) == 0)
        assert np.all(sample_luminance(solid_image("white", (8, 8)), 4, 4) == 255)

    def test_grayscale_and_palette_modes(self, solid_image):
        for mode in ("L", "P", "LA"):
            gray = sample_luminance(solid_image("white", (6, 6)).convert(mode), 3, 3)
            assert np.all(gray == 255)

    def test_source_untouched(self, gradient_image):
        before = gradient_image.tobytes()
        sample_luminance(gradient_image, 10, 3)
        assert gradient_image.mode == "RGB"
        assert gradient_image.tobytes() == before

    def test_transparent_blank_policy(self):
        img = Image.new("RGBA", (4, 4), color=(0, 0, 0, 0))
        assert np.all(sample_luminance(img, 2, 2, transparent_blank=True) == 255)

    def test_transparent_ignored_by_default(self):
        img = Image.new("RGBA", (4, 4), color=(0, 0, 0, 0))
        assert np.all(sample_luminance(img, 2, 2) == 0)

    def test_opaque_cells_unaffected_by_policy(self):
        img = Image.new("RGBA", (4, 4), color=(0, 0, 0, 255))
        assert np.all(sample_luminance(img, 2, 2, transparent_blank=True) == 0)


# ---------------------------------------------------------------------------
# Charset mapping
# ---------------------------------------------------------------------------


class TestCharsetMapper:
    def test_ramp(self):
        assert CHARSET == "@#%*+=-:. "
        assert len(CHARSET) == 10

    def test_boundaries(self):
        assert map_gray_to_char(0) == "@"
        assert map_gray_to_char(255) == " "
        assert ramp_index(0) == 0
        assert ramp_index(255) == len(CHARSET) - 1

    def test_monotonic(self):
        indices = [ramp_index(g) for g in np.linspace(0, 255, 1021)]
        assert all(a <= b for a, b in zip(indices, indices[1:]))

    def test_floor_buckets(self):
        # 9 steps over 255: 28.33 per bucket
        assert ramp_index(28) == 0
        assert ramp_index(29) == 1
        assert ramp_index(254.9) == 8

    def test_out_of_range_clamped(self):
        assert map_gray_to_char(-10) == "@"
        assert map_gray_to_char(300) == " "


class TestGridToRows:
    def test_exact_width(self):
        grid = np.linspace(0, 255, 30).reshape(3, 10)
        rows = grid_to_rows(grid)
        assert len(rows) == 3
        assert all(len(r) == 10 for r in rows)

    def test_matches_scalar_mapper(self):
        grid = np.array([[0, 50, 100], [150, 200, 255]], dtype=float)
        rows = grid_to_rows(grid)
        expected = ["".join(map_gray_to_char(g) for g in row) for row in grid]
        assert rows == expected

    def test_trailing_spaces_kept(self):
        rows = grid_to_rows(np.array([[0, 255, 255]], dtype=float))
        assert rows == ["@  "]
