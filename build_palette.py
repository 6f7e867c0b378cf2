"""
Palette generation around a central color.

A central color is swept through a narrow band of hues and a ladder of
values to produce a 10x10 colorset; a fixed table of cells is then picked
from it to form a 9-color palette for categorical annotation.
"""

import logging
from dataclasses import dataclass

import numpy as np

from color_convert import (
    ColorLike, hsv_array_to_rgb, normalize_hex, parse_color, rgb_array_to_hex,
    rgb_array_to_hsv,
)
from colorspace import ChromaScatter, colorspace_points
from plot_data import colorset_tiles, palette_tiles, weave_rects

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

COLORSET_SIZE = 100

# Hue sweep: HUE_OFFSET + i * HUE_STEP around the central hue, i = 0..99
HUE_OFFSET = -0.049
HUE_STEP = 0.001

# Value ladder: VALUE_OFFSET + j * VALUE_STEP around the clamped central value
VALUE_MIN = 0.4
VALUE_MAX = 0.8
VALUE_OFFSET = -0.25
VALUE_STEP = 0.05
VALUE_LEVELS = 10

# 1-based colorset cells making up the palette. Spread across the grid for
# perceptual separation; every palette depends on this exact order.
SELECTION_INDICES = (68, 10, 65, 50, 100, 35, 84, 38, 14)

# varibow saturation / value cycles
VARIBOW_SATURATIONS = (0.55, 0.7, 0.85, 1.0)
VARIBOW_VALUES = (1.0, 0.8, 0.6)


@dataclass(frozen=True)
class PaletteResult:
    """Everything derived from one central color."""
    central_color: str  # '#RRGGBB'
    palette: list  # 9 hex colors, in SELECTION_INDICES order
    colorset: list  # 100 hex colors
    selection: tuple  # 1-based colorset cells used for the palette
    palette_tiles: list  # TileRecord per palette color, labelled by cell number
    colorset_tiles: list  # TileRecord per colorset cell
    weave: list  # RectRecord list for the palette weave
    chroma: ChromaScatter  # palette on the chromaticity plane


# =============================================================================
# Colorset
# =============================================================================

def hue_sweep(central_hue: float) -> np.ndarray:
    """Return the 100 hues around central_hue, wrapped back into [0, 1]."""
    hues = central_hue + HUE_OFFSET + np.arange(COLORSET_SIZE) * HUE_STEP
    hues = np.where(hues < 0, hues + 1, hues)
    hues = np.where(hues > 1, hues - 1, hues)
    return hues


def value_sweep(central_value: float) -> np.ndarray:
    """Return the value ladder for central_value, tiled across the colorset."""
    clamped = min(max(central_value, VALUE_MIN), VALUE_MAX)
    if clamped != central_value:
        logger.debug("Clamped central value %.3f to %.3f", central_value, clamped)

    ladder = clamped + VALUE_OFFSET + np.arange(VALUE_LEVELS) * VALUE_STEP
    return np.tile(ladder, COLORSET_SIZE // VALUE_LEVELS)


def build_colorset(central_color: ColorLike) -> list[str]:
    """
    Build the 100-color set around a central color.

    Hue steps by HUE_STEP across all 100 cells, value cycles every
    VALUE_LEVELS cells and saturation stays at the central color's.

    Raises:
        InvalidColorError: If central_color cannot be parsed
    """
    central_rgb = np.array([parse_color(central_color)])
    hue, sat, val = rgb_array_to_hsv(central_rgb)[0]

    hsv = np.column_stack([
        hue_sweep(hue),
        np.full(COLORSET_SIZE, sat),
        value_sweep(val),
    ])
    return rgb_array_to_hex(hsv_array_to_rgb(hsv))


def build_palette(central_color: ColorLike) -> PaletteResult:
    """
    Generate a palette of related colors around a central color.

    Returns:
        PaletteResult with the 9-color palette, the 100-color set it was
        picked from, and the plot records for both plus the weave and
        chromaticity displays.

    Raises:
        InvalidColorError: If central_color cannot be parsed
    """
    colorset = build_colorset(central_color)
    palette = [colorset[i - 1] for i in SELECTION_INDICES]

    logger.debug("Built palette %s from %r", palette, central_color)

    return PaletteResult(
        central_color=normalize_hex(central_color),
        palette=palette,
        colorset=colorset,
        selection=SELECTION_INDICES,
        palette_tiles=palette_tiles(palette, labels=SELECTION_INDICES),
        colorset_tiles=colorset_tiles(colorset, selection=SELECTION_INDICES),
        weave=weave_rects(palette),
        chroma=colorspace_points(palette),
    )


# =============================================================================
# Rainbow
# =============================================================================

def varibow(n_colors: int) -> list[str]:
    """
    Generate a rainbow palette with variation in saturation and value.

    Hues are evenly spaced at i / n_colors; saturation and value cycle through
    VARIBOW_SATURATIONS and VARIBOW_VALUES so that neighbouring hues also
    differ in intensity.
    """
    if n_colors < 0:
        raise ValueError(f"n_colors must be non-negative, got {n_colors}")
    if n_colors == 0:
        return []

    idx = np.arange(n_colors)
    hsv = np.column_stack([
        idx / n_colors,
        np.resize(VARIBOW_SATURATIONS, n_colors),
        np.resize(VARIBOW_VALUES, n_colors),
    ])
    return rgb_array_to_hex(hsv_array_to_rgb(hsv))
