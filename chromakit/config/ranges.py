"""
Range Registry
==============

The authoritative numeric domain for every color channel.

+---------+-------------------+
| channel | domain            |
+=========+===================+
| r, g, b | [0, 255]          |
| h       | [0, 360) (cyclic) |
| s, l    | [0, 100]          |
| a       | [0, 1] or [0, 100]|
+---------+-------------------+

The alpha maximum depends on the :class:`AlphaProfile`. A registry is an
immutable value; :data:`DEFAULT_RANGES` is built once at import time and every
public function accepts a ``ranges=`` keyword to use another one.

Examples
--------
>>> range_of("h")
ChannelRange(min=0, max=360)
>>> RangeRegistry.from_profile(AlphaProfile.PERCENTAGE).a
100
"""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from numbers import Real
from typing import NamedTuple, Optional

from ..errors import InvalidChannelError, RangeConfigError


class AlphaProfile(str, Enum):
    UNIT = "unit"
    PERCENTAGE = "percentage"


max_alpha = {
    AlphaProfile.UNIT: 1,
    AlphaProfile.PERCENTAGE: 100,
}

CHANNEL_KEYS = ("r", "g", "b", "h", "s", "l", "a")


class ChannelRange(NamedTuple):
    min: int
    max: int


def validate_range(value: object, throw_on_invalid: bool = False) -> bool:
    """
    Check that ``value`` can serve as a channel maximum.

    A maximum must be a real, integral, strictly positive number.

    Args:
        value: Candidate maximum.
        throw_on_invalid: Raise :class:`RangeConfigError` instead of returning False.

    Returns:
        True when valid, False otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        error = f"{value!r} ({type(value).__name__}) is not a number."
    elif not math.isfinite(value) or int(value) != value:
        error = f"{value!r} is not an integer."
    elif value <= 0:
        error = "Range can not be less than or equal to zero."
    else:
        return True

    if throw_on_invalid:
        raise RangeConfigError(error)
    return False


@dataclass(frozen=True)
class RangeRegistry:
    """Immutable table of channel maxima. Minima are always 0."""

    rgb: int = 255
    h: int = 360
    s: int = 100
    l: int = 100
    a: int = 1

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            try:
                validate_range(value, throw_on_invalid=True)
            except RangeConfigError as exc:
                raise RangeConfigError(f"invalid maximum for '{f.name}': {exc}") from None
            # normalize 255.0 -> 255
            object.__setattr__(self, f.name, int(value))

    @classmethod
    def from_profile(cls, profile: AlphaProfile | str = AlphaProfile.UNIT, **maxima: int) -> RangeRegistry:
        try:
            profile = AlphaProfile(profile)
        except ValueError:
            raise RangeConfigError(f"unknown alpha profile: {profile!r}") from None
        return cls(a=max_alpha[profile], **maxima)

    @property
    def alpha_profile(self) -> Optional[AlphaProfile]:
        for profile, maximum in max_alpha.items():
            if maximum == self.a:
                return profile
        return None

    @property
    def r(self) -> int:
        return self.rgb

    @property
    def g(self) -> int:
        return self.rgb

    @property
    def b(self) -> int:
        return self.rgb

    def max_of(self, channel: str) -> int:
        """Return the maximum for a channel key."""
        if channel not in CHANNEL_KEYS:
            raise InvalidChannelError(
                f"unknown channel {channel!r}; expected one of {', '.join(CHANNEL_KEYS)}"
            )
        return getattr(self, channel)

    def range_of(self, channel: str) -> ChannelRange:
        return ChannelRange(0, self.max_of(channel))


DEFAULT_RANGES = RangeRegistry()


def resolve_ranges(ranges: Optional[RangeRegistry] = None) -> RangeRegistry:
    """Return ``ranges`` or the process-wide default registry."""
    return ranges if ranges is not None else DEFAULT_RANGES


def range_of(channel: str, ranges: Optional[RangeRegistry] = None) -> ChannelRange:
    """
    Look up the ``[0, max]`` domain of a channel.

    Raises:
        InvalidChannelError: if ``channel`` is not one of ``r, g, b, h, s, l, a``.
    """
    return resolve_ranges(ranges).range_of(channel)
