"""
CSS string rendering.

>>> to_string(RGBColor(255, 0, 0))
'rgb(255, 0, 0)'
>>> to_string(HSLColor(120, 100, 50, 0.5))
'hsla(120, 100%, 50%, 0.5)'

Channels are rounded to integers right before rendering; they are not
constrained. The printed alpha is always on the CSS [0, 1] scale with at most
three decimals, whatever the registry alpha profile.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

from .adjust.constrain import round_color
from .colors.hsl import HSLColor
from .colors.rgb import RGBColor
from .colors.validators import as_color, is_hex
from .config.ranges import RangeRegistry, resolve_ranges
from .conversions.hex import DEFAULT_HEX
from .utils.num_utils import round_float

logger = logging.getLogger(__name__)

ALPHA_DECIMALS = 3


def format_alpha(alpha: float, ranges: Optional[RangeRegistry] = None) -> Optional[str]:
    """CSS alpha text for ``alpha``, or None when the color is opaque."""
    rng = resolve_ranges(ranges)
    normalized = round_float(alpha / rng.a, ALPHA_DECIMALS)
    if normalized == 1:
        return None
    return f"{normalized:g}"


def rgb_to_string(color: RGBColor, ranges: Optional[RangeRegistry] = None) -> str:
    c = as_color(color, ranges)
    if not isinstance(c, RGBColor):
        logger.debug("rgb_to_string: %r is not an rgb color, rendering %s", color, DEFAULT_HEX)
        return DEFAULT_HEX
    c = round_color(c, ranges=ranges)
    alpha = format_alpha(c.a, ranges)
    if alpha is None:
        return f"rgb({c.r}, {c.g}, {c.b})"
    return f"rgba({c.r}, {c.g}, {c.b}, {alpha})"


def hsl_to_string(color: HSLColor, ranges: Optional[RangeRegistry] = None) -> str:
    c = as_color(color, ranges)
    if not isinstance(c, HSLColor):
        logger.debug("hsl_to_string: %r is not an hsl color, rendering %s", color, DEFAULT_HEX)
        return DEFAULT_HEX
    c = round_color(c, ranges=ranges)
    alpha = format_alpha(c.a, ranges)
    if alpha is None:
        return f"hsl({c.h}, {c.s}%, {c.l}%)"
    return f"hsla({c.h}, {c.s}%, {c.l}%, {alpha})"


def to_string(color: Any, ranges: Optional[RangeRegistry] = None) -> str:
    """
    Render any color as a CSS color string.

    Hex strings are returned verbatim; anything that is not a color renders
    as ``#000000``.
    """
    if is_hex(color):
        return color

    c = as_color(color, ranges)
    if isinstance(c, RGBColor):
        return rgb_to_string(c, ranges)
    if isinstance(c, HSLColor):
        return hsl_to_string(c, ranges)

    logger.debug("to_string: %r is not a color, rendering %s", color, DEFAULT_HEX)
    return DEFAULT_HEX
