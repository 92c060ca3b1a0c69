import math
from numbers import Integral, Real
from typing import Any

from boundednumbers import clamp


def is_number(value: Any) -> bool:
    """True for real, non-boolean, finite numbers."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def constrain(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``; integers stay integers."""
    result = clamp(value, low, high)
    if isinstance(value, Integral) and isinstance(low, Integral) and isinstance(high, Integral):
        return int(result)
    return float(result)


def euclidean_modulo(value: float, modulus: float) -> float:
    """Modulo whose result always has the sign of ``modulus``."""
    return ((value % modulus) + modulus) % modulus


def normalize(value: float, low: float, high: float) -> float:
    """Map ``value`` from ``[low, high]`` to ``[0, 1]`` (no clamping)."""
    return (value - low) / (high - low)


def map_range(
    value: float,
    in_low: float,
    in_high: float,
    out_low: float,
    out_high: float,
    clamp_output: bool = False,
) -> float:
    """
    Linearly map ``value`` from one interval onto another.

    Args:
        value: Number to map
        in_low, in_high: Source interval
        out_low, out_high: Target interval
        clamp_output: Clamp the result into the target interval

    Returns:
        The mapped number
    """
    mapped = out_low + (value - in_low) * (out_high - out_low) / (in_high - in_low)
    if clamp_output:
        lo, hi = min(out_low, out_high), max(out_low, out_high)
        mapped = constrain(mapped, lo, hi)
    return mapped


def segment_map(value: float, segments: int, low: float, high: float) -> int:
    """
    Index of the segment containing ``value`` when ``[low, high)`` is split
    into ``segments`` equal half-open pieces. Out-of-range values go to the
    nearest end segment.
    """
    index = math.floor((value - low) * segments / (high - low))
    return int(min(max(index, 0), segments - 1))


def cubic_bezier(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    """One-dimensional cubic Bezier curve evaluated at ``t``."""
    u = 1 - t
    return u * u * u * p0 + 3 * u * u * t * p1 + 3 * u * t * t * p2 + t * t * t * p3


def parabola(x: float, k: float = 1.0) -> float:
    """``(4x(1-x))^k``: 0 at x=0 and x=1, peaks at 1 for x=0.5."""
    base = 4.0 * x * (1.0 - x)
    if base <= 0:
        return 0.0
    return base ** k


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_float(value: float, precision: int = 0) -> float:
    """Round half up to ``precision`` decimal digits."""
    if precision <= 0:
        return float(round_half_up(value))
    factor = 10 ** precision
    return round(math.floor(value * factor + 0.5) / factor, precision)


def precision_for_range(maximum: float) -> int:
    # <=1 -> 3 digits, <=10 -> 2, <=100 -> 1, anything wider -> integers
    if maximum <= 1:
        return 3
    if maximum <= 10:
        return 2
    if maximum <= 100:
        return 1
    return 0
