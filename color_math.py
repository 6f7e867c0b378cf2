"""
Additive mixing and averaging of colors in normalized RGB space.
"""

import numpy as np

from color_convert import ColorLike, parse_color, parse_colors, to_hex


class EmptyInputError(ValueError):
    """Raised when an aggregate operation receives no colors."""


def color_sum(color1: ColorLike, color2: ColorLike) -> str:
    """
    Mix two colors additively in RGB space.

    Each channel saturates at 1.0 instead of wrapping, so
    color_sum('red', 'blue') == '#FF00FF' and anything plus white is white.
    """
    mix = np.array(parse_color(color1)) + np.array(parse_color(color2))
    mix = np.clip(mix, 0.0, 1.0)
    return to_hex(*mix)


def color_mean(colors) -> str:
    """
    Compute the per-channel mean of colors in RGB space.

    The result is rounded half-up onto 8-bit channels, so the mean of
    white and black is '#808080'.

    Raises:
        EmptyInputError: If no colors are given
    """
    rgb = parse_colors(colors)
    if len(rgb) == 0:
        raise EmptyInputError("Cannot average an empty sequence of colors")
    return to_hex(*rgb.mean(axis=0))
