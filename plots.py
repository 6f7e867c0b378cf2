"""
Render palette plot records as matplotlib figures.

Every function returns the Figure and leaves saving or showing it to the
caller. Close figures with matplotlib.pyplot.close() when done.
"""

import logging
from typing import Optional

from build_palette import PaletteResult
from colorspace import ChromaScatter, colorspace_points
from plot_data import RectRecord, TileRecord, colorset_tiles, palette_tiles, weave_rects

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

POINT_SIZE = 20
ANCHOR_SIZE = 80


def tile_plot(tiles: list[TileRecord], title: Optional[str] = None,
              figsize: Optional[tuple] = None):
    """Draw unit tiles centred on their (x, y) with optional text labels."""
    import matplotlib.pyplot as plt
    from matplotlib.patches import Rectangle

    if figsize is None:
        width = max((t.x for t in tiles), default=1)
        height = max((t.y for t in tiles), default=1)
        figsize = (max(width, 2), max(height, 1) + 0.5)

    fig, ax = plt.subplots(figsize=figsize)

    for tile in tiles:
        ax.add_patch(Rectangle((tile.x - 0.5, tile.y - 0.5), 1, 1, facecolor=tile.fill))
        if tile.label is not None:
            ax.text(tile.x, tile.y, tile.label, ha='center', va='center',
                    color=tile.label_color or 'black', fontsize=8)

    if tiles:
        ax.set_xlim(min(t.x for t in tiles) - 0.5, max(t.x for t in tiles) + 0.5)
        ax.set_ylim(min(t.y for t in tiles) - 0.5, max(t.y for t in tiles) + 0.5)
    ax.set_aspect('equal')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    if title:
        ax.set_title(title)

    fig.tight_layout()
    logger.debug("Rendered %d tiles", len(tiles))
    return fig


def palette_plot(palette, labels=None):
    """Show a palette as a row of tiles."""
    return tile_plot(palette_tiles(palette, labels=labels))


def colorset_plot(colorset, selection=()):
    """Show a colorset grid; selected cells get light labels."""
    return tile_plot(colorset_tiles(colorset, selection=selection))


def rect_plot(rects: list[RectRecord], figsize: tuple = (6, 6)):
    """Draw filled rectangles in order, with the y axis running downwards."""
    import matplotlib.pyplot as plt
    from matplotlib.patches import Rectangle

    fig, ax = plt.subplots(figsize=figsize)

    for rect in rects:
        ax.add_patch(Rectangle((rect.xmin, rect.ymin), rect.xmax - rect.xmin,
                               rect.ymax - rect.ymin, facecolor=rect.fill, linewidth=0))

    if rects:
        ax.set_xlim(min(r.xmin for r in rects), max(r.xmax for r in rects))
        ax.set_ylim(min(r.ymin for r in rects), max(r.ymax for r in rects))
    ax.invert_yaxis()
    ax.set_aspect('equal')
    for side in ('top', 'right'):
        ax.spines[side].set_visible(False)

    fig.tight_layout()
    return fig


def weave_plot(palette):
    """Show every pairwise crossing of the palette colors."""
    return rect_plot(weave_rects(palette))


def scatter_plot(scatter: ChromaScatter, figsize: tuple = (6, 6)):
    """Draw chroma scatter records, with anchors as larger outlined points."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize)

    if scatter.points:
        ax.scatter([p.x for p in scatter.points], [p.y for p in scatter.points],
                   c=[p.color for p in scatter.points], s=POINT_SIZE)
    if scatter.anchors:
        ax.scatter([p.x for p in scatter.anchors], [p.y for p in scatter.anchors],
                   c=[p.color for p in scatter.anchors], s=ANCHOR_SIZE,
                   edgecolors='black', linewidths=1)

    ax.set_xlim(*scatter.limits)
    ax.set_ylim(*scatter.limits)
    ax.set_xlabel('alpha')
    ax.set_ylabel('beta')
    ax.set_aspect('equal')
    for side in ('top', 'right'):
        ax.spines[side].set_visible(False)

    fig.tight_layout()
    return fig


def colorspace_plot(palette, show_pures: bool = True):
    """Show a palette on the alpha-beta chromaticity plane."""
    return scatter_plot(colorspace_points(palette, show_pures=show_pures))


def palette_plots(result: PaletteResult) -> dict:
    """
    Render all displays of a generated palette.

    Returns:
        dict with 'palette_plot', 'colorset_plot', 'weave' and 'colorspace'
        figures
    """
    return {
        'palette_plot': tile_plot(result.palette_tiles),
        'colorset_plot': tile_plot(result.colorset_tiles),
        'weave': rect_plot(result.weave),
        'colorspace': scatter_plot(result.chroma),
    }
