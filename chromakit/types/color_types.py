from __future__ import annotations
from typing import Any, Literal, Mapping, Sequence, Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelKey = Literal["r", "g", "b", "h", "s", "l", "a"]
ColorKind = Literal["rgb", "hsl"]
ColorMode = Literal["rgb", "hsl", "hex"]
HexString = str
ColorMapping = Mapping[str, Any]
# anything the permissive API accepts as a color; validated structurally
ColorLike = Union["ColorBase", ColorMapping, HexString]
StrengthLike = Union[Scalar, "ColorBase", ColorMapping, Sequence[Scalar]]

RGB_CHANNELS: Tuple[ChannelKey, ...] = ("r", "g", "b", "a")
HSL_CHANNELS: Tuple[ChannelKey, ...] = ("h", "s", "l", "a")
COLOR_MODES = {"rgb", "hsl", "hex"}


def normalize_mode(mode: str) -> ColorMode:
    """
    Lower-case a color mode name and check it.

    Args:
        mode: "rgb", "hsl" or "hex", any case

    Returns:
        The lower-cased mode
    """
    m = mode.lower()
    if m not in COLOR_MODES:
        raise ValueError(f"Unknown color mode: {mode}")
    return m  # type: ignore[return-value]
