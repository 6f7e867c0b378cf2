"""
Color parsing and conversion between names, hex strings, RGB and HSV.

All numeric colors are normalized: RGB and HSV channels live in [0, 1], and
hue is a fraction of a full turn rather than degrees.
"""

import re
from typing import Sequence, Union

import numpy as np
from matplotlib.colors import hsv_to_rgb as _mpl_hsv_to_rgb
from matplotlib.colors import rgb_to_hsv as _mpl_rgb_to_hsv
from PIL import ImageColor


# =============================================================================
# Constants
# =============================================================================

CHANNEL_MAX = 255  # 8-bit channel resolution

HEX_PATTERN = re.compile(r"^#?([0-9A-Fa-f]{6})([0-9A-Fa-f]{2})?$")
GREY_LEVEL_PATTERN = re.compile(r"^gr[ae]y(\d{1,3})$")  # R-style gray0 .. gray100


class InvalidColorError(ValueError):
    """Raised when a value cannot be interpreted as a color."""


ColorLike = Union[str, Sequence[float]]


# =============================================================================
# Parsing
# =============================================================================

def _parse_grey_level(name: str):
    match = GREY_LEVEL_PATTERN.match(name)
    if not match:
        return None
    level = int(match.group(1))
    if level > 100:
        return None
    channel = int(level * CHANNEL_MAX / 100 + 0.5) / CHANNEL_MAX
    return (channel, channel, channel)


def parse_color(color: ColorLike) -> tuple:
    """
    Interpret a color value as a normalized (r, g, b) tuple.

    Accepts:
        - hex strings '#RRGGBB' or 'RRGGBB' (any case); a trailing alpha pair
          '#RRGGBBAA' is accepted and ignored
        - color names understood by Pillow (CSS/X11 names such as 'dodgerblue')
        - grey levels 'gray0' .. 'gray100' / 'grey0' .. 'grey100'
        - an (r, g, b) sequence already normalized to [0, 1]

    Raises:
        InvalidColorError: If the value matches none of the forms above
    """
    if isinstance(color, str):
        text = color.strip()
        match = HEX_PATTERN.match(text)
        if match:
            digits = match.group(1)
            return tuple(int(digits[i:i + 2], 16) / CHANNEL_MAX for i in (0, 2, 4))

        name = text.lower()
        grey = _parse_grey_level(name)
        if grey is not None:
            return grey

        try:
            rgb = ImageColor.getrgb(name)
        except ValueError as e:
            raise InvalidColorError(f"Unrecognized color: {color!r}") from e
        return tuple(c / CHANNEL_MAX for c in rgb[:3])

    try:
        values = np.asarray(color, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidColorError(f"Unrecognized color: {color!r}") from e

    if values.shape != (3,) or np.isnan(values).any():
        raise InvalidColorError(f"Expected an (r, g, b) triple, got {color!r}")
    if values.min() < 0 or values.max() > 1:
        raise InvalidColorError(f"RGB channels must lie in [0, 1], got {color!r}")

    return (float(values[0]), float(values[1]), float(values[2]))


def parse_colors(colors) -> np.ndarray:
    """Parse a sequence of colors into an (n, 3) array of normalized RGB."""
    if isinstance(colors, str):
        colors = [colors]
    parsed = [parse_color(c) for c in colors]
    if not parsed:
        return np.empty((0, 3), dtype=np.float64)
    return np.array(parsed, dtype=np.float64)


# =============================================================================
# Hex Formatting
# =============================================================================

def rgb_array_to_hex(rgb: np.ndarray) -> list[str]:
    """
    Convert an (n, 3) array of normalized RGB to uppercase hex strings.

    Channels are clamped to [0, 1] and rounded half-up onto 256 levels.
    """
    rgb = np.asarray(rgb, dtype=np.float64).reshape(-1, 3)
    levels = np.floor(np.clip(rgb, 0.0, 1.0) * CHANNEL_MAX + 0.5).astype(np.int64)
    return [f"#{r:02X}{g:02X}{b:02X}" for r, g, b in levels]


def to_hex(r: float, g: float, b: float) -> str:
    """Convert normalized RGB channels to '#RRGGBB'."""
    return rgb_array_to_hex(np.array([r, g, b]))[0]


def normalize_hex(color: ColorLike) -> str:
    """Return the canonical '#RRGGBB' form of any parseable color."""
    return to_hex(*parse_color(color))


# =============================================================================
# HSV
# =============================================================================

def rgb_array_to_hsv(rgb: np.ndarray) -> np.ndarray:
    """Convert an (n, 3) array of normalized RGB to HSV."""
    rgb = np.clip(np.asarray(rgb, dtype=np.float64).reshape(-1, 3), 0.0, 1.0)
    return _mpl_rgb_to_hsv(rgb)


def hsv_array_to_rgb(hsv: np.ndarray) -> np.ndarray:
    """
    Convert an (n, 3) array of HSV to normalized RGB.

    Hue wraps modulo 1.0; saturation and value are clamped to [0, 1].
    """
    hsv = np.array(hsv, dtype=np.float64).reshape(-1, 3)
    hsv[:, 0] = np.mod(hsv[:, 0], 1.0)
    hsv[:, 1:] = np.clip(hsv[:, 1:], 0.0, 1.0)
    return _mpl_hsv_to_rgb(hsv)


def rgb_to_hsv(r: float, g: float, b: float) -> tuple:
    """Convert normalized RGB to (h, s, v)."""
    h, s, v = rgb_array_to_hsv(np.array([r, g, b]))[0]
    return (float(h), float(s), float(v))


def hsv_to_rgb(h: float, s: float, v: float) -> tuple:
    """Convert (h, s, v) to normalized RGB. Hue is taken modulo 1.0."""
    r, g, b = hsv_array_to_rgb(np.array([h, s, v]))[0]
    return (float(r), float(g), float(b))


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """Convert (h, s, v) straight to '#RRGGBB'."""
    return rgb_array_to_hex(hsv_array_to_rgb(np.array([h, s, v])))[0]
