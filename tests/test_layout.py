"""Tests for row resolution, clamping and rounding helpers."""

import pytest

from AsciiRender.core import (
    round_half_up,
    clamp_cols,
    clamp_dpr,
    resolve_rows,
    analyze_text_structure,
)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (-0.5, 0), (-1.5, -1), (7.0, 7)],
    )
    def test_values(self, value, expected):
        assert round_half_up(value) == expected


class TestResolveRows:
    def test_formula(self):
        # 100 cols, glyph 0.6 wide per unit height, 400x300 image
        assert resolve_rows(100, 400, 300, 0.6) == 45

    def test_square_glyph_square_image(self):
        assert resolve_rows(80, 500, 500, 1.0) == 80

    @pytest.mark.parametrize("cols", [10, 11, 57, 100, 333, 600])
    @pytest.mark.parametrize("aspect", [0.01, 0.5, 0.6, 1.0, 3.0])
    @pytest.mark.parametrize("size", [(1, 1), (10000, 1), (1, 10000), (640, 480)])
    def test_always_at_least_one(self, cols, aspect, size):
        w, h = size
        assert resolve_rows(cols, w, h, aspect) >= 1

    def test_one_pixel_image(self):
        assert resolve_rows(10, 1, 1, 0.55) == round_half_up(10 * 0.55)
        assert resolve_rows(10, 1, 1, 0.001) == 1

    def test_degenerate_dimensions(self):
        assert resolve_rows(100, 0, 100, 0.6) == 1
        assert resolve_rows(100, 100, 0, 0.6) == 1


class TestClampCols:
    def test_in_range(self):
        assert clamp_cols(120) == 120

    def test_below_and_above(self):
        assert clamp_cols(3) == 10
        assert clamp_cols(5000) == 600

    def test_custom_range(self):
        assert clamp_cols(2, min_cols=1, max_cols=1000) == 2
        assert clamp_cols(999, min_cols=1, max_cols=1000) == 999

    @pytest.mark.parametrize("value", [None, "", "abc", float("nan"), float("inf")])
    def test_unparsable_uses_default(self, value):
        assert clamp_cols(value) == 100

    def test_numeric_strings_and_floats(self):
        assert clamp_cols("42") == 42
        assert clamp_cols("42.9") == 42
        assert clamp_cols(42.9) == 42


class TestClampDpr:
    def test_positive(self):
        assert clamp_dpr(2) == 2.0
        assert clamp_dpr("1.5") == 1.5

    @pytest.mark.parametrize("value", [0, -1, None, "x", float("nan")])
    def test_invalid_uses_default(self, value):
        assert clamp_dpr(value) == 1.0


class TestAnalyzeTextStructure:
    def test_counts(self):
        s = analyze_text_structure("ab\n\nabcd")
        assert s["num_lines"] == 3
        assert s["max_line_chars"] == 4
        assert s["avg_line_chars"] == 2

    def test_empty(self):
        s = analyze_text_structure("")
        assert s["num_lines"] == 0
        assert s["max_line_chars"] == 0
