"""
Unit tests for the alpha-beta chromaticity projection.
"""

import itertools
import math

import pytest

from colorspace import (
    PURE_COLORS, ChromaPoint, ChromaScatter, col2ab, colorspace_points, to_alpha_beta,
)


class TestToAlphaBeta:
    """Test projection of single colors"""

    def test_primaries(self):
        assert to_alpha_beta("red") == pytest.approx((1.0, 0.0))
        assert to_alpha_beta("#00FF00") == pytest.approx((-0.5, math.sqrt(3) / 2))
        assert to_alpha_beta("blue") == pytest.approx((-0.5, -math.sqrt(3) / 2))

    def test_greys_sit_at_origin(self):
        for code in ["#000000", "#808080", "#FFFFFF"]:
            assert to_alpha_beta(code) == pytest.approx((0.0, 0.0))

    def test_lightness_is_discarded_along_a_ray(self):
        a1, b1 = to_alpha_beta("#FF0000")
        a2, b2 = to_alpha_beta("#800000")
        assert b1 == b2 == pytest.approx(0.0)
        assert a2 == pytest.approx(a1 * 128 / 255)

    def test_bounded(self):
        levels = [0, 64, 128, 192, 255]
        for r, g, b in itertools.product(levels, repeat=3):
            alpha, beta = to_alpha_beta(f"#{r:02X}{g:02X}{b:02X}")
            assert -1.0 <= alpha <= 1.0
            assert -1.0 <= beta <= 1.0


class TestCol2ab:
    """Test batch projection"""

    def test_order_and_colors_preserved(self):
        points = col2ab(["blue", "#ff0000", "lime"])
        assert all(isinstance(p, ChromaPoint) for p in points)
        assert [p.color for p in points] == ["#0000FF", "#FF0000", "#00FF00"]
        assert points[1].alpha == pytest.approx(1.0)

    def test_empty(self):
        assert col2ab([]) == []


class TestColorspacePoints:
    """Test scatter records for the chromaticity plot"""

    def test_with_pure_anchors(self):
        scatter = colorspace_points(["#1B9E77", "#D95F02"])
        assert isinstance(scatter, ChromaScatter)
        assert len(scatter.points) == 2
        assert [p.color for p in scatter.anchors] == list(PURE_COLORS)
        assert scatter.limits == (-1.1, 1.1)

    def test_without_pure_anchors(self):
        scatter = colorspace_points(["#1B9E77"], show_pures=False)
        assert scatter.anchors == []

    def test_point_coordinates(self):
        point = colorspace_points(["red"]).points[0]
        assert (point.x, point.y) == pytest.approx((1.0, 0.0))
        assert point.color == "#FF0000"
