"""
Variant-detecting converters.

RGB is the pivot: every HSL <-> HEX conversion goes through RGB so the
conversion math lives in exactly one place.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional

from ..colors.color_base import ColorBase
from ..colors.hsl import HSLColor
from ..colors.rgb import RGBColor
from ..colors.validators import as_color, is_hex, is_hsl, is_rgb
from ..config.ranges import RangeRegistry, resolve_ranges
from ..types.color_types import ColorMode, HexString, normalize_mode
from .hex import DEFAULT_HEX, hex_to_hsl, hex_to_rgb, hsl_to_hex, rgb_to_hex
from .to_hsl import rgb_to_hsl
from .to_rgb import hsl_to_rgb

logger = logging.getLogger(__name__)


def detect_mode(color: Any) -> Optional[ColorMode]:
    """Return "rgb", "hsl" or "hex" for a color, None for anything else."""
    if is_rgb(color):
        return "rgb"
    if is_hsl(color):
        return "hsl"
    if is_hex(color):
        return "hex"
    return None


def to_rgb(color: Any, ranges: Optional[RangeRegistry] = None) -> RGBColor:
    rng = resolve_ranges(ranges)
    mode = detect_mode(color)
    if mode == "rgb":
        return as_color(color, rng)  # type: ignore[return-value]
    if mode == "hsl":
        return hsl_to_rgb(color, ranges=rng)
    if mode == "hex":
        return hex_to_rgb(color, ranges=rng)
    logger.debug("to_rgb: %r is not a color, returning default RGB", color)
    return RGBColor(0, 0, 0, rng.a)


def to_hsl(color: Any, ranges: Optional[RangeRegistry] = None) -> HSLColor:
    rng = resolve_ranges(ranges)
    mode = detect_mode(color)
    if mode == "hsl":
        return as_color(color, rng)  # type: ignore[return-value]
    if mode == "rgb":
        return rgb_to_hsl(color, ranges=rng)
    if mode == "hex":
        return hex_to_hsl(color, ranges=rng)
    logger.debug("to_hsl: %r is not a color, returning default HSL", color)
    return HSLColor(0, 0, 0, rng.a)


def to_hex(color: Any, ranges: Optional[RangeRegistry] = None) -> HexString:
    mode = detect_mode(color)
    if mode == "hex":
        return color
    if mode == "rgb":
        return rgb_to_hex(color, ranges=ranges)
    if mode == "hsl":
        return hsl_to_hex(color, ranges=ranges)
    logger.debug("to_hex: %r is not a color, returning %s", color, DEFAULT_HEX)
    return DEFAULT_HEX


CONVERTERS: Dict[ColorMode, Callable[..., Any]] = {
    "rgb": to_rgb,
    "hsl": to_hsl,
    "hex": to_hex,
}


def convert(color: Any, to_mode: str, ranges: Optional[RangeRegistry] = None) -> ColorBase | HexString:
    """
    Convert ``color`` into the variant named by ``to_mode``.

    Args:
        color: Any color variant
        to_mode: "rgb", "hsl" or "hex" (case insensitive)
        ranges: Registry giving the channel scales

    Returns:
        The converted color; defaults as described for :func:`to_rgb`,
        :func:`to_hsl` and :func:`to_hex` for non-color input.
    """
    return CONVERTERS[normalize_mode(to_mode)](color, ranges=ranges)
