"""
Unit tests for color parsing and conversion.
"""

import itertools

import numpy as np
import pytest

from color_convert import (
    InvalidColorError, hsv_array_to_rgb, hsv_to_hex, hsv_to_rgb, normalize_hex,
    parse_color, parse_colors, rgb_array_to_hex, rgb_to_hsv, to_hex,
)


class TestParseColor:
    """Test interpretation of hex strings, names and triples"""

    def test_named_color(self):
        assert parse_color("red") == (1.0, 0.0, 0.0)
        assert to_hex(*parse_color("red")) == "#FF0000"

    def test_names_are_case_insensitive(self):
        assert normalize_hex("DarkBlue") == "#00008B"
        assert normalize_hex("dodgerblue") == "#1E90FF"
        assert normalize_hex("orangered") == "#FF4500"

    def test_hex_with_and_without_hash(self):
        assert normalize_hex("#ff8000") == "#FF8000"
        assert normalize_hex("ff8000") == "#FF8000"
        assert normalize_hex("#AbCdEf") == "#ABCDEF"

    def test_hex_alpha_is_ignored(self):
        assert normalize_hex("#11223344") == "#112233"

    def test_grey_levels(self):
        assert normalize_hex("gray80") == "#CCCCCC"
        assert normalize_hex("grey80") == "#CCCCCC"
        assert normalize_hex("gray0") == "#000000"
        assert normalize_hex("gray100") == "#FFFFFF"

    def test_normalized_triple(self):
        assert parse_color((0.25, 0.5, 1.0)) == (0.25, 0.5, 1.0)
        assert parse_color(np.array([0.0, 1.0, 0.0])) == (0.0, 1.0, 0.0)

    @pytest.mark.parametrize("bad", [
        "notacolor", "#12345", "#GGGGGG", "gray101", "", None, 42,
        (0.5, 2.0, 0.0), (0.1, 0.2), ["red", "blue"],
    ])
    def test_invalid_colors_raise(self, bad):
        with pytest.raises(InvalidColorError):
            parse_color(bad)

    def test_invalid_color_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_color("notacolor")

    def test_parse_colors_shape(self):
        rgb = parse_colors(["red", "#00FF00", "blue"])
        assert rgb.shape == (3, 3)
        np.testing.assert_array_equal(rgb, np.eye(3))

    def test_parse_colors_single_string(self):
        assert parse_colors("red").shape == (1, 3)

    def test_parse_colors_empty(self):
        assert parse_colors([]).shape == (0, 3)


class TestToHex:
    """Test formatting of normalized channels"""

    def test_basic_colors(self):
        assert to_hex(1, 0, 0) == "#FF0000"
        assert to_hex(0, 0, 0) == "#000000"
        assert to_hex(1, 1, 1) == "#FFFFFF"

    def test_channels_are_clamped(self):
        assert to_hex(1.5, -0.2, 0.5) == "#FF0080"

    def test_rounds_half_up(self):
        # 0.5 * 255 = 127.5
        assert to_hex(0.5, 0.5, 0.5) == "#808080"

    def test_round_trip_hex(self):
        levels = [0, 1, 127, 128, 200, 254, 255]
        for r, g, b in itertools.product(levels, repeat=3):
            code = f"#{r:02X}{g:02X}{b:02X}"
            assert to_hex(*parse_color(code)) == code
            assert normalize_hex(code.lower().lstrip("#")) == code

    def test_array_form(self):
        rgb = np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        assert rgb_array_to_hex(rgb) == ["#FF0000", "#0000FF"]


class TestHsv:
    """Test HSV conversion and hue wrapping"""

    def test_primaries(self):
        assert rgb_to_hsv(1, 0, 0) == pytest.approx((0.0, 1.0, 1.0))
        assert rgb_to_hsv(0, 1, 0) == pytest.approx((1 / 3, 1.0, 1.0))
        assert rgb_to_hsv(0, 0, 1) == pytest.approx((2 / 3, 1.0, 1.0))

    def test_grey_has_no_saturation(self):
        h, s, v = rgb_to_hsv(0.5, 0.5, 0.5)
        assert s == 0.0
        assert v == pytest.approx(0.5)

    def test_hue_wraps_instead_of_clamping(self):
        expected = hsv_to_rgb(0.25, 1, 1)
        assert expected == pytest.approx((0.5, 1.0, 0.0))
        assert hsv_to_rgb(1.25, 1, 1) == pytest.approx(expected)
        assert hsv_to_rgb(-0.75, 1, 1) == pytest.approx(expected)

    def test_hue_of_one_equals_zero(self):
        assert hsv_to_hex(1.0, 1, 1) == hsv_to_hex(0.0, 1, 1) == "#FF0000"

    def test_value_is_clamped(self):
        np.testing.assert_allclose(
            hsv_array_to_rgb(np.array([[0.0, 0.0, 1.0000000001]])), [[1.0, 1.0, 1.0]]
        )

    @pytest.mark.parametrize("code", ["#1B9E77", "#D95F02", "#7570B3", "#E7298A", "#808080"])
    def test_round_trip_through_hsv(self, code):
        assert hsv_to_hex(*rgb_to_hsv(*parse_color(code))) == code
