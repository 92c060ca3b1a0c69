"""
Arithmetic on colors.

Every operator keeps the variant of its first operand (hex in, hex out) and
constrains the result. The first operand's alpha is kept.

- ``add``: RGB channels are summed and clamped; HSL channels are summed with
  the hue wrapped modulo 360 and s/l clamped.
- ``sub`` and ``multiply`` work in RGB space.
- ``invert``: ``channel' = max - channel`` in RGB space.

Operands may be full colors (converted into the working space), scalars
(broadcast to r, g and b), or partial mappings such as ``{"l": 10}`` whose
absent fields mean "no change". A zero in an additive operand contributes
nothing, which is what separates "no adjustment" from "adjust to zero".

The operators are also injected into the variants:

>>> from chromakit import RGB, HSL
>>> RGB(250, 10, 0) + RGB(10, 10, 10)
RGBColor(r=255, g=20, b=10, a=1)
>>> (HSL(350, 0, 0) + HSL(20, 0, 0)).h
10
"""
from __future__ import annotations
import logging
import operator
from collections.abc import Mapping
from typing import Any, Callable, Optional, Tuple

from ..adjust.constrain import constrain_hsl, constrain_rgb
from ..config.ranges import RangeRegistry, resolve_ranges
from ..conversions.hex import rgb_to_hex
from ..conversions.to_hsl import rgb_to_hsl
from ..conversions.wrapper import detect_mode, to_hsl, to_rgb
from ..utils.num_utils import is_number
from .color_base import ColorBase
from .hsl import HSLColor
from .rgb import RGBColor
from .validators import as_color, is_color

logger = logging.getLogger(__name__)

Triple = Tuple[float, float, float]


def _operand_values(operand: Any, space: str, neutral: float, rng: RangeRegistry) -> Optional[Triple]:
    """Express ``operand`` as three channel values of ``space`` ("rgb"/"hsl")."""
    keys = "rgb" if space == "rgb" else "hsl"

    if is_number(operand):
        if space != "rgb":
            return None
        return (operand, operand, operand)

    if is_color(operand):
        c = to_rgb(operand, ranges=rng) if space == "rgb" else to_hsl(operand, ranges=rng)
        return c.value[:3]  # type: ignore[return-value]

    # partial adjustment, e.g. {"l": 10}
    if isinstance(operand, Mapping) and operand and "kind" not in operand and set(operand) <= set(keys + "a"):
        return tuple(
            operand[k] if k in operand and is_number(operand[k]) else neutral
            for k in keys
        )  # type: ignore[return-value]

    return None


def _from_rgb(result: RGBColor, mode: Optional[str], rng: RangeRegistry) -> Any:
    if mode == "hsl":
        return rgb_to_hsl(result, ranges=rng)
    if mode == "hex":
        return rgb_to_hex(result, ranges=rng)
    return result


def _rgb_operation(
    color: Any,
    operand: Any,
    op: Callable[[float, float], float],
    neutral: float,
    name: str,
    rng: RangeRegistry,
) -> Any:
    values = _operand_values(operand, "rgb", neutral, rng)
    if values is None:
        logger.debug("%s: unsupported operand %r, returning color unchanged", name, operand)
        return color

    base = to_rgb(color, ranges=rng)
    result = RGBColor(
        op(base.r, values[0]),
        op(base.g, values[1]),
        op(base.b, values[2]),
        base.a,
    )
    return _from_rgb(constrain_rgb(result, rng), detect_mode(color), rng)


def add(color: Any, operand: Any, ranges: Optional[RangeRegistry] = None) -> Any:
    """
    Add ``operand`` to ``color`` in the color's own space.

    Args:
        color: RGB, HSL or hex color
        operand: Color, scalar or partial mapping
        ranges: Registry giving the channel scales

    Returns:
        A constrained color of the same variant as ``color``. If ``color`` is
        not a color, ``operand`` is returned when it is one, otherwise
        ``color`` passes through.
    """
    rng = resolve_ranges(ranges)
    if not is_color(color):
        if is_color(operand):
            return as_color(operand, rng) or operand
        logger.debug("add: neither %r nor %r is a color", color, operand)
        return color

    if detect_mode(color) != "hsl" or is_number(operand):
        return _rgb_operation(color, operand, operator.add, 0, "add", rng)

    values = _operand_values(operand, "hsl", 0, rng)
    if values is None:
        logger.debug("add: unsupported operand %r, returning color unchanged", operand)
        return color

    base = to_hsl(color, ranges=rng)
    # constrain_hsl wraps the hue and clamps s/l
    return constrain_hsl(
        HSLColor(base.h + values[0], base.s + values[1], base.l + values[2], base.a),
        rng,
    )


def sub(color: Any, operand: Any, ranges: Optional[RangeRegistry] = None) -> Any:
    """Subtract per channel in RGB space; scalars broadcast to r, g, b."""
    rng = resolve_ranges(ranges)
    if not is_color(color):
        logger.debug("sub: %r is not a color", color)
        return color
    return _rgb_operation(color, operand, operator.sub, 0, "sub", rng)


def multiply(color: Any, operand: Any, ranges: Optional[RangeRegistry] = None) -> Any:
    """
    Multiply per channel in RGB space.

    A scalar scales r, g and b; a color multiplies channel by channel; a
    partial mapping leaves its absent channels untouched (factor 1).
    """
    rng = resolve_ranges(ranges)
    if not is_color(color):
        logger.debug("multiply: %r is not a color", color)
        return color
    return _rgb_operation(color, operand, operator.mul, 1, "multiply", rng)


def invert(color: Any, ranges: Optional[RangeRegistry] = None) -> Any:
    """
    Invert a color in RGB space, alpha kept.

    HSL and hex colors are converted to RGB, inverted and converted back.
    """
    rng = resolve_ranges(ranges)
    if not is_color(color):
        logger.debug("invert: %r is not a color", color)
        return color

    base = to_rgb(color, ranges=rng)
    result = RGBColor(rng.rgb - base.r, rng.rgb - base.g, rng.rgb - base.b, base.a)
    return _from_rgb(constrain_rgb(result, rng), detect_mode(color), rng)


# -----------------------
# Operator overloads
# -----------------------
def _is_operand(other: Any) -> bool:
    return is_number(other) or isinstance(other, (ColorBase, Mapping, str))


def _binary_operator(fn):
    def operation(self, other):
        if not _is_operand(other):
            return NotImplemented
        return fn(self, other)
    return operation


ColorBase.__add__ = _binary_operator(add)
ColorBase.__radd__ = _binary_operator(add)
ColorBase.__sub__ = _binary_operator(sub)
ColorBase.__mul__ = _binary_operator(multiply)
ColorBase.__rmul__ = _binary_operator(multiply)
ColorBase.__invert__ = lambda self: invert(self)
