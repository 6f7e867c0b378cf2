"""
Map numeric values onto an interpolated color ramp.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from color_convert import ColorLike, normalize_hex, parse_colors, rgb_array_to_hex
from color_math import EmptyInputError

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

RAMP_SIZE = 1001  # Ramp entries; index 0 = min_val end, 1000 = max_val end
RAMP_MIDPOINT = RAMP_SIZE // 2

DEFAULT_RAMP_COLORS = ("darkblue", "dodgerblue", "gray80", "orange", "orangered")
DEFAULT_MISSING_COLOR = "black"


class DegenerateRangeError(ValueError):
    """Raised when the resolved min_val exceeds max_val."""


# =============================================================================
# Ramp
# =============================================================================

def color_ramp(colorset: Sequence[ColorLike] = DEFAULT_RAMP_COLORS,
               n: int = RAMP_SIZE) -> list[str]:
    """
    Interpolate n colors linearly in RGB between the anchor colors.

    Anchors are spread evenly across the ramp: anchor k of K lands on index
    round(k / (K - 1) * (n - 1)). A single anchor gives a constant ramp.

    Raises:
        EmptyInputError: If colorset is empty
        InvalidColorError: If an anchor cannot be parsed
    """
    anchors = parse_colors(colorset)
    if len(anchors) == 0:
        raise EmptyInputError("A color ramp needs at least one anchor color")
    if n < 1:
        return []
    if len(anchors) == 1:
        return rgb_array_to_hex(np.repeat(anchors, n, axis=0))

    stops = np.linspace(0.0, 1.0, len(anchors))
    positions = np.linspace(0.0, 1.0, n)
    ramp = np.column_stack([
        np.interp(positions, stops, anchors[:, channel]) for channel in range(3)
    ])
    return rgb_array_to_hex(ramp)


def _as_float_array(x) -> np.ndarray:
    """Convert x to floats, turning None into NaN."""
    if np.isscalar(x) or x is None:
        x = [x]
    return np.array([np.nan if v is None else v for v in x], dtype=np.float64)


# =============================================================================
# Value Mapping
# =============================================================================

def values_to_colors(x,
                     min_val: Optional[float] = None,
                     max_val: Optional[float] = None,
                     colorset: Sequence[ColorLike] = DEFAULT_RAMP_COLORS,
                     missing_color: Optional[ColorLike] = DEFAULT_MISSING_COLOR) -> list:
    """
    Convert values to colors along a color ramp.

    Args:
        x: Numeric values; None or NaN entries count as missing
        min_val: Low end of the scale. Defaults to the smallest finite value
            in x; when given, values below it are raised to it
        max_val: High end of the scale. Defaults to the largest finite value
            in x; when given, values above it are lowered to it
        colorset: Anchor colors for the RAMP_SIZE-entry ramp
        missing_color: Color for missing entries, or None to leave them as None

    Returns:
        One '#RRGGBB' string per entry of x, in the same order. Infinite
        values land on the nearer end of the resolved scale; if a bound has
        to be derived and x holds no finite value, every entry is missing.

        Degenerate inputs short-circuit the scale:
        - a bound given and every present value sits on min_val: the ramp start
        - more than one entry and no spread: the ramp midpoint
        - a single entry: the ramp midpoint

    Raises:
        DegenerateRangeError: If the resolved min_val exceeds max_val
    """
    values = _as_float_array(x)
    present = ~np.isnan(values)
    missing = normalize_hex(missing_color) if missing_color is not None else None
    unscaled = [missing] * len(values)

    if not present.any():
        return unscaled

    bounded = min_val is not None or max_val is not None

    if max_val is None:
        finite = np.isfinite(values)
        if not finite.any():
            return unscaled
        max_val = float(values[finite].max())
    else:
        values = np.minimum(values, max_val)
    if min_val is None:
        finite = np.isfinite(values)
        if not finite.any():
            return unscaled
        min_val = float(values[finite].min())
    else:
        values = np.maximum(values, min_val)

    if min_val > max_val:
        raise DegenerateRangeError(f"min_val {min_val} is greater than max_val {max_val}")

    # Leftover infinities sit on the bound they overshoot; NaN stays NaN
    values = np.clip(values, min_val, max_val)
    ramp = color_ramp(colorset, RAMP_SIZE)

    observed = values[present]
    if bounded and np.all(observed == min_val):
        logger.debug("All %d values sit on min_val %s, using ramp start", len(observed), min_val)
        indices = np.zeros(len(values), dtype=np.int64)
    elif len(values) > 1 and np.var(observed) == 0:
        logger.debug("Values have no spread, using ramp midpoint")
        indices = np.full(len(values), RAMP_MIDPOINT, dtype=np.int64)
    elif len(values) == 1:
        indices = np.full(1, RAMP_MIDPOINT, dtype=np.int64)
    else:
        scaled = (np.where(present, values, min_val) - min_val) / (max_val - min_val)
        indices = np.clip(np.rint(scaled * (RAMP_SIZE - 1)), 0, RAMP_SIZE - 1).astype(np.int64)

    return [ramp[i] if ok else missing for i, ok in zip(indices, present)]
