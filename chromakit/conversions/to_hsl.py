from __future__ import annotations
import logging
from typing import Any, Optional

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat

from ..colors.hsl import HSLColor
from ..colors.rgb import RGBColor
from ..colors.validators import as_color, is_color
from ..config.ranges import RangeRegistry, resolve_ranges
from ..utils.num_utils import map_range

logger = logging.getLogger(__name__)

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert normalized RGB to HSL.

    The hue comes from whichever channel holds the maximum, checked in R, G, B
    order, so grays (and any tie) resolve to the red branch.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    # Hue, in sixths of a turn
    if delta == 0:
        hue = 0.0
    elif max_c == r:
        hue = ((g - b) / delta) % 6
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    hue = (hue * 60) % 360

    lightness = UnitFloat((max_c + min_c) / 2.0)

    if delta == 0:
        saturation = 0.0
    else:
        saturation = UnitFloat(delta / (1 - abs(2 * lightness - 1)))

    return hue, float(saturation), float(lightness)


def rgb_to_hsl(color: Any, ranges: Optional[RangeRegistry] = None) -> HSLColor:
    """
    Convert a color to HSL, pivoting through RGB.

    Args:
        color: RGB variant or mapping; HSL and hex input are first converted to RGB
        ranges: Registry giving the channel scales

    Returns:
        HSLColor in registry units, alpha passed through. ``HSL()`` (all
        zeros, opaque) when ``color`` is not a color.
    """
    rng = resolve_ranges(ranges)
    c = as_color(color, rng)
    if not isinstance(c, RGBColor):
        if not is_color(color):
            logger.debug("rgb_to_hsl: %r is not a color, returning default HSL", color)
            return HSLColor(0, 0, 0, rng.a)
        from .wrapper import to_rgb  # local import to avoid cycles
        c = to_rgb(color, ranges=rng)

    r, g, b = (map_range(v, 0, rng.rgb, 0, 1, clamp_output=True) for v in (c.r, c.g, c.b))
    h, s, l = unit_rgb_to_hsl(r, g, b)

    return HSLColor(
        map_range(h, 0, 360, 0, rng.h) % rng.h,
        s * rng.s,
        l * rng.l,
        c.a,
    )


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert normalized RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    # Lightness
    lightness = np.clip((max_c + min_c) / 2.0, 0.0, 1.0)

    # Saturation
    saturation = np.zeros(out_shape)
    mask = delta > 0
    saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))
    saturation = np.clip(saturation, 0.0, 1.0)

    # Hue, ties resolved R before G before B
    hue = np.zeros(out_shape)
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = np.mod((g[mask_r] - b[mask_r]) / delta[mask_r], 6)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue = np.mod(hue * 60, 360)

    return np.stack([hue, saturation, lightness], axis=-1)


def np_rgb_to_hsl(rgb: NDArray, ranges: Optional[RangeRegistry] = None) -> NDArray:
    """
    Vectorized :func:`rgb_to_hsl` for arrays of shape (..., 3) in registry units.

    Alpha is not part of the array; carry it separately.
    """
    rng = resolve_ranges(ranges)
    arr = np.clip(np.asarray(rgb, dtype=float) / rng.rgb, 0.0, 1.0)
    if arr.shape[-1] != 3:
        raise ValueError(f"rgb array must have last dimension 3, got shape {arr.shape}")

    hsl = np_unit_rgb_to_hsl(arr[..., 0], arr[..., 1], arr[..., 2])
    scale = np.array([rng.h / 360, rng.s, rng.l], dtype=float)
    out = hsl * scale
    out[..., 0] = np.mod(out[..., 0], rng.h)
    return out
