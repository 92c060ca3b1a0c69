"""
HEX encoding of RGB colors.

``#RRGGBB`` for opaque colors, ``#RRGGBBAA`` otherwise. Decoding also
accepts the short ``#RGB`` / ``#RGBA`` forms, each nibble duplicated
(``#f0c`` reads as ``#ff00cc``). The alpha byte maps onto the registry alpha
range: ``byte = round(a / A_RANGE * 255)``.

HSL never converts to HEX directly; both directions pivot through RGB.
"""
from __future__ import annotations
import logging
from typing import Any, Optional

from ..adjust.constrain import constrain_rgb, round_color
from ..colors.hsl import HSLColor
from ..colors.rgb import RGBColor
from ..colors.validators import as_color, is_color, is_hex
from ..config.ranges import RangeRegistry, resolve_ranges
from ..types.color_types import HexString
from ..utils.num_utils import map_range, precision_for_range, round_float, round_half_up
from .to_hsl import rgb_to_hsl
from .to_rgb import hsl_to_rgb

logger = logging.getLogger(__name__)

DEFAULT_HEX = "#000000"


def expand_hex(value: HexString) -> HexString:
    """Expand ``#RGB`` / ``#RGBA`` to the long form; long forms pass unchanged."""
    digits = value[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits.lower()


def rgb_to_hex(color: Any, ranges: Optional[RangeRegistry] = None) -> HexString:
    """
    Encode a color as ``#rrggbb[aa]`` with lower-case digits.

    Channels are constrained and rounded to integers first. The alpha byte is
    only written when the color is not fully opaque.
    """
    rng = resolve_ranges(ranges)
    c = as_color(color, rng)
    if not isinstance(c, RGBColor):
        if not is_color(color):
            logger.debug("rgb_to_hex: %r is not a color, returning %s", color, DEFAULT_HEX)
            return DEFAULT_HEX
        from .wrapper import to_rgb  # local import to avoid cycles
        c = to_rgb(color, ranges=rng)

    c = round_color(constrain_rgb(c, rng), ranges=rng)
    out = f"#{int(c.r):02x}{int(c.g):02x}{int(c.b):02x}"
    if c.a != rng.a:
        alpha_byte = round_half_up(map_range(c.a, 0, rng.a, 0, 255, clamp_output=True))
        out += f"{alpha_byte:02x}"
    return out


def hex_to_rgb(color: Any, ranges: Optional[RangeRegistry] = None) -> RGBColor:
    """
    Decode a hex string into a constrained RGBColor.

    RGB/HSL input is first encoded with :func:`chromakit.to_hex` so any color
    is accepted; anything else decodes to opaque black.
    """
    rng = resolve_ranges(ranges)
    if not is_hex(color):
        if not is_color(color):
            logger.debug("hex_to_rgb: %r is not a color, returning default RGB", color)
            return RGBColor(0, 0, 0, rng.a)
        from .wrapper import to_hex  # local import to avoid cycles
        color = to_hex(color, ranges=rng)

    digits = expand_hex(color)[1:]
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)

    a: float = rng.a
    if len(digits) == 8:
        a = map_range(int(digits[6:8], 16), 0, 255, 0, rng.a)
        a = round_float(a, precision_for_range(rng.a))

    return constrain_rgb(RGBColor(r, g, b, a), rng)


def hsl_to_hex(color: Any, ranges: Optional[RangeRegistry] = None) -> HexString:
    if not is_color(color):
        logger.debug("hsl_to_hex: %r is not a color, returning %s", color, DEFAULT_HEX)
        return DEFAULT_HEX
    return rgb_to_hex(hsl_to_rgb(color, ranges=ranges), ranges=ranges)


def hex_to_hsl(color: Any, ranges: Optional[RangeRegistry] = None) -> HSLColor:
    if not is_color(color):
        logger.debug("hex_to_hsl: %r is not a color, returning default HSL", color)
        return HSLColor(0, 0, 0, resolve_ranges(ranges).a)
    return rgb_to_hsl(hex_to_rgb(color, ranges=ranges), ranges=ranges)
