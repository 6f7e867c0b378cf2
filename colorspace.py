"""
Projection of colors onto the alpha-beta chromaticity plane.

alpha = r - (g + b) / 2
beta  = sqrt(3) / 2 * (g - b)

This is the hue/chroma plane of HSV and HSL: brightness is discarded, so
colors that differ only in lightness land on top of each other.
See https://en.wikipedia.org/wiki/HSL_and_HSV#Hue_and_chroma
"""

import math
from dataclasses import dataclass, field

import numpy as np

from color_convert import ColorLike, parse_color, parse_colors, rgb_array_to_hex
from plot_data import PointRecord


# =============================================================================
# Constants
# =============================================================================

BETA_SCALE = math.sqrt(3) / 2

# Red, yellow, green, cyan, blue, magenta: the hexagon corners
PURE_COLORS = ("#FF0000", "#FFFF00", "#00FF00", "#00FFFF", "#0000FF", "#FF00FF")

AXIS_LIMITS = (-1.1, 1.1)


@dataclass(frozen=True)
class ChromaPoint:
    """A color and its position on the chromaticity plane."""
    color: str  # '#RRGGBB'
    alpha: float
    beta: float


@dataclass(frozen=True)
class ChromaScatter:
    """Scatter records for a palette, plus optional orientation anchors."""
    points: list
    anchors: list = field(default_factory=list)
    limits: tuple = AXIS_LIMITS


def _alpha_beta(rgb: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    r, g, b = rgb[:, 0], rgb[:, 1], rgb[:, 2]
    alphas = r - 0.5 * (g + b)
    betas = BETA_SCALE * (g - b)
    return alphas, betas


def to_alpha_beta(color: ColorLike) -> tuple[float, float]:
    """Project a single color to (alpha, beta). Both lie in [-1, 1]."""
    alphas, betas = _alpha_beta(np.array([parse_color(color)]))
    return (float(alphas[0]), float(betas[0]))


def col2ab(colors) -> list[ChromaPoint]:
    """Project a palette to chroma points, one per color, in order."""
    rgb = parse_colors(colors)
    if len(rgb) == 0:
        return []
    alphas, betas = _alpha_beta(rgb)
    hexes = rgb_array_to_hex(rgb)
    return [
        ChromaPoint(color=h, alpha=float(a), beta=float(b))
        for h, a, b in zip(hexes, alphas, betas)
    ]


def _to_points(chroma: list[ChromaPoint]) -> list[PointRecord]:
    return [PointRecord(x=p.alpha, y=p.beta, color=p.color) for p in chroma]


def colorspace_points(palette, show_pures: bool = True) -> ChromaScatter:
    """
    Build scatter records for a palette on the chromaticity plane.

    With show_pures, the six pure colors are added as anchor records so the
    plane can be read without axes.
    """
    anchors = _to_points(col2ab(PURE_COLORS)) if show_pures else []
    return ChromaScatter(points=_to_points(col2ab(palette)), anchors=anchors)
