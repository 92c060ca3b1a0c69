"""
Constrain / Round engine.

``constrain`` clamps every channel into the registry ranges (hue is wrapped,
never clamped). ``round_color`` rounds channels with either integer or
range-derived precision. Both accept any color variant, both are
idempotent, and both hand back non-color input untouched.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

from ..colors.hsl import HSLColor
from ..colors.rgb import RGBColor
from ..colors.validators import as_color, is_hex
from ..config.ranges import RangeRegistry, resolve_ranges
from ..utils.num_utils import (
    constrain as clamp_value,
    euclidean_modulo,
    precision_for_range,
    round_float,
)

logger = logging.getLogger(__name__)


def constrain_rgb(color: RGBColor, ranges: Optional[RangeRegistry] = None) -> RGBColor:
    rng = resolve_ranges(ranges)
    return RGBColor(
        clamp_value(color.r, 0, rng.rgb),
        clamp_value(color.g, 0, rng.rgb),
        clamp_value(color.b, 0, rng.rgb),
        clamp_value(color.a, 0, rng.a),
    )


def constrain_hsl(color: HSLColor, ranges: Optional[RangeRegistry] = None) -> HSLColor:
    rng = resolve_ranges(ranges)
    return HSLColor(
        euclidean_modulo(color.h, rng.h),
        clamp_value(color.s, 0, rng.s),
        clamp_value(color.l, 0, rng.l),
        clamp_value(color.a, 0, rng.a),
    )


def constrain(color: Any, ranges: Optional[RangeRegistry] = None) -> Any:
    """
    Clamp a color into the registry ranges.

    Args:
        color: RGB/HSL variant, RGB/HSL mapping or hex string
        ranges: Registry to clamp against, defaults to the process registry

    Returns:
        A constrained color of the same variant (a tagged instance for
        mapping input), or ``color`` unchanged if it is not a color.
    """
    if is_hex(color):
        from ..conversions.hex import hex_to_rgb, rgb_to_hex  # local import to avoid cycles
        return rgb_to_hex(hex_to_rgb(color, ranges=ranges), ranges=ranges)

    c = as_color(color, ranges)
    if isinstance(c, RGBColor):
        return constrain_rgb(c, ranges)
    if isinstance(c, HSLColor):
        return constrain_hsl(c, ranges)

    logger.debug("constrain: %r is not a color, passing through", color)
    return color


def _round_channel(value: float, maximum: int, preserve_fraction: bool, is_alpha: bool) -> float:
    if preserve_fraction or is_alpha:
        precision = precision_for_range(maximum)
    else:
        precision = 0
    rounded = round_float(value, precision)
    if precision == 0:
        return int(rounded)
    return rounded


def round_color(color: Any, preserve_fraction: bool = False, ranges: Optional[RangeRegistry] = None) -> Any:
    """
    Round every channel of a color.

    With ``preserve_fraction=False`` r, g, b, h, s and l are rounded half up
    to integers. With ``preserve_fraction=True`` each channel keeps as many
    decimals as its registry range warrants:

    ==========  =========
    range       decimals
    ==========  =========
    <= 1        3
    <= 10       2
    <= 100      1
    wider       0
    ==========  =========

    Alpha is exempt from integer rounding even with ``preserve_fraction=False``:
    it always keeps its range precision, otherwise a [0, 1] alpha would
    collapse to fully transparent or fully opaque.

    Hex strings are already integral; they are returned constrained.
    """
    if is_hex(color):
        return constrain(color, ranges)

    c = as_color(color, ranges)
    if c is None:
        logger.debug("round_color: %r is not a color, passing through", color)
        return color

    rng = resolve_ranges(ranges)
    values = []
    for key, v in zip(c.channels, c.value):
        values.append(_round_channel(v, rng.max_of(key), preserve_fraction, key == "a"))

    if isinstance(c, HSLColor):
        # 359.6 rounds to 360, which is hue 0
        values[0] = euclidean_modulo(values[0], rng.h)
    return c.__class__(*values)
