"""
Plot-ready records for palette displays.

These records are the hand-off to a renderer: tiles for palette and colorset
grids, points for scatter plots and rectangles for the weave matrix. They
carry positions and colors only; axes, legends and layout are up to the
renderer (see plots.py).
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from color_convert import normalize_hex


# =============================================================================
# Constants
# =============================================================================

GRID_ROWS = 10  # Colorset cells per column
SELECTED_LABEL_COLOR = "white"  # Light text on the picked cells
DEFAULT_LABEL_COLOR = "black"


# =============================================================================
# Record Types
# =============================================================================

@dataclass(frozen=True)
class TileRecord:
    """A unit tile centred on (x, y)."""
    x: int
    y: int
    fill: str  # '#RRGGBB'
    label: Optional[str] = None
    label_color: Optional[str] = None


@dataclass(frozen=True)
class PointRecord:
    """A scatter point."""
    x: float
    y: float
    color: str  # '#RRGGBB'


@dataclass(frozen=True)
class RectRecord:
    """An axis-aligned filled rectangle."""
    xmin: float
    xmax: float
    ymin: float
    ymax: float
    fill: str  # '#RRGGBB'


# =============================================================================
# Builders
# =============================================================================

def palette_tiles(palette: Sequence, labels: Optional[Sequence] = None) -> list[TileRecord]:
    """Lay a palette out as a single row of tiles at x = 1..n, y = 1."""
    if labels is not None and len(labels) != len(palette):
        raise ValueError(
            f"Got {len(labels)} labels for a palette of {len(palette)} colors"
        )

    tiles = []
    for i, color in enumerate(palette):
        label = str(labels[i]) if labels is not None else None
        tiles.append(TileRecord(x=i + 1, y=1, fill=normalize_hex(color), label=label))
    return tiles


def colorset_tiles(colorset: Sequence, selection: Sequence[int] = ()) -> list[TileRecord]:
    """
    Lay a colorset out column by column on a grid GRID_ROWS tall.

    Cell k (1-based) sits at x = ceil(k / GRID_ROWS), y = (k - 1) % GRID_ROWS + 1
    and is labelled with k. Cells whose number is in `selection` get light
    label text, everything else dark.
    """
    picked = set(selection)
    tiles = []
    for k, color in enumerate(colorset, start=1):
        tiles.append(TileRecord(
            x=(k - 1) // GRID_ROWS + 1,
            y=(k - 1) % GRID_ROWS + 1,
            fill=normalize_hex(color),
            label=str(k),
            label_color=SELECTED_LABEL_COLOR if k in picked else DEFAULT_LABEL_COLOR,
        ))
    return tiles


def weave_rects(palette: Sequence) -> list[RectRecord]:
    """
    Build the rectangles of a weave plot for a palette of n colors.

    Color i (1-based) gets a vertical stripe spanning x in [2i, 2i + 1] and,
    after all vertical stripes, a horizontal stripe spanning y in [2i, 2i + 1].
    Drawn in order, cell (i, j) shows stripe j crossing over stripe i.
    """
    fills = [normalize_hex(c) for c in palette]
    n = len(fills)
    full_min, full_max = 1, 2 * n + 2

    vertical = [
        RectRecord(xmin=2 * i, xmax=2 * i + 1, ymin=full_min, ymax=full_max, fill=fill)
        for i, fill in enumerate(fills, start=1)
    ]
    horizontal = [
        RectRecord(xmin=full_min, xmax=full_max, ymin=2 * i, ymax=2 * i + 1, fill=fill)
        for i, fill in enumerate(fills, start=1)
    ]
    return vertical + horizontal
