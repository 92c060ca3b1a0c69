"""
Permissive constructors.

``RGB``, ``HSL`` and ``HEX`` never raise: missing or non-numeric channels
fall back to 0 and a missing alpha means fully opaque for the registry.
Pass ``constrain=True`` to clamp on construction.
"""
from __future__ import annotations
from typing import Any, Optional

import numpy as np

from ..adjust.constrain import constrain as constrain_color
from ..conversions.hex import hex_to_rgb, rgb_to_hex
from ..config.ranges import RangeRegistry, resolve_ranges
from ..types.color_types import HexString
from ..utils.num_utils import is_number, map_range
from .hsl import HSLColor
from .rgb import RGBColor
from .validators import as_color, is_hex


def RGB(
    r: Any = None,
    g: Any = None,
    b: Any = None,
    a: Any = None,
    constrain: bool = False,
    ranges: Optional[RangeRegistry] = None,
) -> RGBColor:
    """
    Build an RGBColor.

    ``RGB(128)`` with only the first channel numeric gives the gray
    ``(128, 128, 128)``.
    """
    rng = resolve_ranges(ranges)
    alpha = a if is_number(a) else rng.a
    if is_number(r) and not is_number(g) and not is_number(b):
        color = RGBColor(r, r, r, alpha)
    else:
        color = RGBColor(
            r if is_number(r) else 0,
            g if is_number(g) else 0,
            b if is_number(b) else 0,
            alpha,
        )
    return constrain_color(color, rng) if constrain else color


def HSL(
    h: Any = None,
    s: Any = None,
    l: Any = None,
    a: Any = None,
    constrain: bool = False,
    ranges: Optional[RangeRegistry] = None,
) -> HSLColor:
    rng = resolve_ranges(ranges)
    color = HSLColor(
        h if is_number(h) else 0,
        s if is_number(s) else 0,
        l if is_number(l) else 0,
        a if is_number(a) else rng.a,
    )
    return constrain_color(color, rng) if constrain else color


def HEX(
    r: Any = None,
    g: Any = None,
    b: Any = None,
    a: Any = None,
    constrain: bool = False,
    ranges: Optional[RangeRegistry] = None,
) -> HexString:
    """Hex string for the given RGB channels. ``HEX()`` is ``#000000``."""
    return rgb_to_hex(RGB(r, g, b, a, constrain=constrain, ranges=ranges), ranges=ranges)


def random_rgb(
    low: Optional[float] = None,
    high: Optional[float] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    ranges: Optional[RangeRegistry] = None,
) -> RGBColor:
    """
    Uniformly random, opaque RGBColor.

    Args:
        low, high: Optional sub-interval the channels are remapped into
        rng: numpy Generator, a fresh ``default_rng()`` when omitted
        ranges: Registry giving the channel scales

    Returns:
        RGBColor with unrounded float channels
    """
    registry = resolve_ranges(ranges)
    generator = rng if rng is not None else np.random.default_rng()
    values = generator.random(3) * registry.rgb

    if is_number(low) and is_number(high) and (low != 0 or high != registry.rgb):
        values = [map_range(v, 0, registry.rgb, low, high) for v in values]

    r, g, b = (float(v) for v in values)
    return RGBColor(r, g, b, registry.a)


def map_color(
    color: Any,
    low: float = 0,
    high: float = 1,
    constrain: bool = True,
    ranges: Optional[RangeRegistry] = None,
) -> Any:
    """
    Map every channel from ``[0, range]`` onto ``[low, high]``.

    The result keeps the input variant (hex input is decoded to RGB first)
    but its channels are in ``[low, high]`` units, not registry units.
    Non-color input is returned unchanged.
    """
    rng = resolve_ranges(ranges)
    if is_hex(color):
        color = hex_to_rgb(color, ranges=rng)

    c = as_color(color, rng)
    if c is None:
        return color

    values = [
        map_range(v, 0, rng.max_of(key), low, high, clamp_output=constrain)
        for key, v in zip(c.channels, c.value)
    ]
    return c.__class__(*values)


__all__ = ["RGB", "HSL", "HEX", "random_rgb", "map_color"]
