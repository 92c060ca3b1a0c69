"""
Tone curves.

Each curve works on the RGB channels normalized to [0, 1]: an increment is
computed per channel from the channel's own value, added, and the result is
mapped back onto ``[0, RGB_MAX]`` and clamped. Alpha is never touched and the
input variant is preserved (HSL in, HSL out; hex in, hex out).

- contrast: ``cubic_bezier(x, 0, -YMAX, YMAX, 0) * strength``. The curve is
  0 at x = 0, 0.5 and 1, pushing darks darker and lights lighter.
- color: ``parabola(x) * strength``, strongest in the mid tones.
- brightness: the color curve with the same strength on r, g and b.
"""
from __future__ import annotations
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional, Tuple

from ..colors.rgb import RGBColor
from ..colors.validators import is_color
from ..config.ranges import RangeRegistry, resolve_ranges
from ..conversions.hex import rgb_to_hex
from ..conversions.to_hsl import rgb_to_hsl
from ..conversions.wrapper import detect_mode, to_rgb
from ..types.color_types import StrengthLike
from ..utils.num_utils import constrain, cubic_bezier, is_number, parabola

logger = logging.getLogger(__name__)

# Peak height of the contrast Bezier; puts the curve extremes near +-1.
YMAX = 3.465

DEFAULT_STRENGTH = 0.01


def contrast_increment(x: float) -> float:
    return cubic_bezier(x, 0, -YMAX, YMAX, 0)


def _strength_triple(strength: Any) -> Optional[Tuple[float, float, float]]:
    if is_number(strength):
        return (strength, strength, strength)
    if isinstance(strength, RGBColor):
        values = (strength.r, strength.g, strength.b)
    elif isinstance(strength, Mapping):
        try:
            values = (strength["r"], strength["g"], strength["b"])
        except KeyError:
            return None
    elif isinstance(strength, Sequence) and not isinstance(strength, str) and len(strength) == 3:
        values = tuple(strength)
    else:
        return None
    if not all(is_number(v) for v in values):
        return None
    return values  # type: ignore[return-value]


def _apply_curve(
    color: Any,
    increment: Callable[[float], float],
    strengths: Tuple[float, float, float],
    rng: RangeRegistry,
) -> Any:
    base = to_rgb(color, ranges=rng)
    channels = []
    for value, strength in zip((base.r, base.g, base.b), strengths):
        x = value / rng.rgb
        channels.append(constrain((x + increment(x) * strength) * rng.rgb, 0, rng.rgb))
    result = RGBColor(*channels, base.a)

    mode = detect_mode(color)
    if mode == "hsl":
        return rgb_to_hsl(result, ranges=rng)
    if mode == "hex":
        return rgb_to_hex(result, ranges=rng)
    return result


def contrast_curve(
    color: Any,
    strength: float = DEFAULT_STRENGTH,
    ranges: Optional[RangeRegistry] = None,
) -> Any:
    """
    Apply the S-shaped contrast curve.

    Args:
        color: RGB, HSL or hex color
        strength: Scale of the increment; negative values flatten contrast
        ranges: Registry giving the channel scales

    Returns:
        Adjusted color of the same variant; non-color input unchanged
    """
    rng = resolve_ranges(ranges)
    if not is_color(color):
        logger.debug("contrast_curve: %r is not a color", color)
        return color
    if not is_number(strength):
        logger.debug("contrast_curve: invalid strength %r", strength)
        return color
    return _apply_curve(color, contrast_increment, (strength, strength, strength), rng)


def color_curve(
    color: Any,
    strength: StrengthLike = DEFAULT_STRENGTH,
    ranges: Optional[RangeRegistry] = None,
) -> Any:
    """
    Lift (or, for negative strength, drop) the mid tones per channel.

    ``strength`` may be a scalar, an RGB color or ``{"r", "g", "b"}`` mapping
    of raw per-channel strengths, or a 3-sequence.
    """
    rng = resolve_ranges(ranges)
    if not is_color(color):
        logger.debug("color_curve: %r is not a color", color)
        return color

    strengths = _strength_triple(strength)
    if strengths is None:
        logger.debug("color_curve: invalid strength %r", strength)
        return color
    return _apply_curve(color, parabola, strengths, rng)


def brightness_curve(
    color: Any,
    strength: float = DEFAULT_STRENGTH,
    ranges: Optional[RangeRegistry] = None,
) -> Any:
    if not is_number(strength):
        logger.debug("brightness_curve: invalid strength %r", strength)
        return color
    return color_curve(color, (strength, strength, strength), ranges=ranges)
