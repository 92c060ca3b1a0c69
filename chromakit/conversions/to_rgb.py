from __future__ import annotations
import logging
from typing import Any, Optional

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsl import HSLColor
from ..colors.rgb import RGBColor
from ..colors.validators import as_color, is_color
from ..config.ranges import RangeRegistry, resolve_ranges
from ..utils.num_utils import constrain, map_range, normalize, segment_map

logger = logging.getLogger(__name__)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to normalized RGB with the six-sector table.

    Args:
        h: Hue in degrees, any real (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)

    # chroma, the strongest component
    c = (1 - abs(2 * l - 1)) * s
    # second strongest component
    x = 0.0 if h == 0 else c * (1 - abs(((h / 60) % 2) - 1))
    # added to every component to match lightness
    m = l - c / 2

    hue_section = segment_map(h, 6, 0, 360)

    if hue_section == 0:
        r, g, b = c, x, 0.0
    elif hue_section == 1:
        r, g, b = x, c, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, c, x
    elif hue_section == 3:
        r, g, b = 0.0, x, c
    elif hue_section == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m


def hsl_to_rgb(color: Any, ranges: Optional[RangeRegistry] = None) -> RGBColor:
    """
    Convert a color to RGB from HSL.

    Args:
        color: HSL variant or mapping; RGB and hex input are routed through
            :func:`chromakit.to_rgb`
        ranges: Registry giving the channel scales

    Returns:
        RGBColor with channels clamped into [0, RGB_MAX], alpha passed
        through. ``RGB()`` (opaque black) when ``color`` is not a color.
    """
    rng = resolve_ranges(ranges)
    c = as_color(color, rng)
    if not isinstance(c, HSLColor):
        if not is_color(color):
            logger.debug("hsl_to_rgb: %r is not a color, returning default RGB", color)
            return RGBColor(0, 0, 0, rng.a)
        from .wrapper import to_rgb  # local import to avoid cycles
        return to_rgb(color, ranges=rng)

    h = map_range(c.h % rng.h, 0, rng.h, 0, 360)
    s = constrain(normalize(c.s, 0, rng.s), 0, 1)
    l = constrain(normalize(c.l, 0, rng.l), 0, 1)

    r, g, b = hsl_to_unit_rgb(h, s, l)
    return RGBColor(
        map_range(r, 0, 1, 0, rng.rgb, clamp_output=True),
        map_range(g, 0, 1, 0, rng.rgb, clamp_output=True),
        map_range(b, 0, 1, 0, rng.rgb, clamp_output=True),
        c.a,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to normalized RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.mod(np.asarray(h, dtype=float), 360)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    c = (1 - np.abs(2 * l - 1)) * s
    x = c * (1 - np.abs(np.mod(h / 60, 2) - 1))
    x = np.where(h == 0, 0.0, x)
    m = l - c / 2

    zero = np.zeros(out_shape)
    hue_section = np.clip(np.floor(h / 60).astype(int), 0, 5)

    # (r, g, b) per sector
    table = [
        (c, x, zero),
        (x, c, zero),
        (zero, c, x),
        (zero, x, c),
        (x, zero, c),
        (c, zero, x),
    ]
    r = np.select([hue_section == i for i in range(6)], [t[0] for t in table])
    g = np.select([hue_section == i for i in range(6)], [t[1] for t in table])
    b = np.select([hue_section == i for i in range(6)], [t[2] for t in table])

    return np.stack([r + m, g + m, b + m], axis=-1)


def np_hsl_to_rgb(hsl: NDArray, ranges: Optional[RangeRegistry] = None) -> NDArray:
    """
    Vectorized :func:`hsl_to_rgb` for arrays of shape (..., 3) in registry units.
    """
    rng = resolve_ranges(ranges)
    arr = np.asarray(hsl, dtype=float)
    if arr.shape[-1] != 3:
        raise ValueError(f"hsl array must have last dimension 3, got shape {arr.shape}")

    h = np.mod(arr[..., 0], rng.h) * (360 / rng.h)
    s = np.clip(arr[..., 1] / rng.s, 0.0, 1.0)
    l = np.clip(arr[..., 2] / rng.l, 0.0, 1.0)

    rgb = np_hsl_to_unit_rgb(h, s, l)
    return np.clip(rgb * rng.rgb, 0, rng.rgb)
