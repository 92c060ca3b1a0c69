"""
Structural color predicates.

Tagged instances (:class:`RGBColor`, :class:`HSLColor`) are classified by
their ``kind``. Plain mappings coming from outside the library (JSON, UI
state) are classified by an explicit ``"kind"`` key when present, otherwise
by the presence of numeric ``r, g, b`` or ``h, s, l`` fields. None of these
functions raise.
"""
from __future__ import annotations
from collections.abc import Mapping
from string import hexdigits
from typing import Any, Optional

from ..config.ranges import RangeRegistry, resolve_ranges
from ..utils.num_utils import is_number
from .color_base import ColorBase
from .hsl import HSLColor
from .rgb import RGBColor

HEX_LENGTHS = {4, 5, 7, 9}
_HEX_DIGITS = frozenset(hexdigits)


def _has_numeric_fields(value: Mapping, keys: str) -> bool:
    return all(k in value and is_number(value[k]) for k in keys)


def _mapping_matches(value: Mapping, kind: str, keys: str) -> bool:
    tag = value.get("kind")
    if tag is not None and tag != kind:
        return False
    return _has_numeric_fields(value, keys)


def is_rgb(value: Any) -> bool:
    if isinstance(value, ColorBase):
        return value.kind == "rgb"
    if isinstance(value, Mapping):
        return _mapping_matches(value, "rgb", "rgb")
    return False


def is_hsl(value: Any) -> bool:
    if isinstance(value, ColorBase):
        return value.kind == "hsl"
    if isinstance(value, Mapping):
        # a mapping carrying both shapes without a tag is read as RGB
        if "kind" not in value and _has_numeric_fields(value, "rgb"):
            return False
        return _mapping_matches(value, "hsl", "hsl")
    return False


def is_hex(value: Any) -> bool:
    """``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``."""
    if not isinstance(value, str) or len(value) not in HEX_LENGTHS:
        return False
    if value[0] != "#":
        return False
    return all(ch in _HEX_DIGITS for ch in value[1:])


def is_color(value: Any) -> bool:
    return is_rgb(value) or is_hsl(value) or is_hex(value)


def as_color(value: Any, ranges: Optional[RangeRegistry] = None) -> Optional[ColorBase]:
    """
    Coerce a structurally valid RGB/HSL value into its tagged variant.

    Tagged instances are returned as is. Mappings missing an alpha get full
    opacity for ``ranges``. Anything else (hex strings included) gives None.
    """
    if isinstance(value, ColorBase):
        return value
    if not isinstance(value, Mapping):
        return None

    full_alpha = resolve_ranges(ranges).a
    alpha = value.get("a")
    if not is_number(alpha):
        alpha = full_alpha

    if is_rgb(value):
        return RGBColor(value["r"], value["g"], value["b"], alpha)
    if is_hsl(value):
        return HSLColor(value["h"], value["s"], value["l"], alpha)
    return None
