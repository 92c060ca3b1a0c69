"""
Mutable color wrapper.

``LiveColor`` owns one canonical RGB state and recomputes its ``hsl`` and
``hex`` views on every read. Channel assignment clamps into the registry
ranges; nothing else happens implicitly.

A LiveColor is meant to be owned and mutated by a single caller. It does no
locking; share immutable ``RGBColor`` snapshots (``live.rgb``) instead.

>>> c = LiveColor((255, 0, 0))
>>> c.invert()
>>> c.rgb
RGBColor(r=0, g=255, b=255, a=1)
>>> c.to_string("hex")
'#00ffff'
"""
from __future__ import annotations
import logging
from collections.abc import Sequence
from typing import Any, Optional

from ..adjust import curves
from ..config.ranges import RangeRegistry, resolve_ranges
from ..conversions.hex import hex_to_rgb
from ..conversions.wrapper import to_hex, to_hsl
from ..conversions.to_rgb import hsl_to_rgb
from ..formatting import to_string
from ..types.color_types import ColorMode, HexString, StrengthLike, normalize_mode
from ..utils.num_utils import constrain, is_number
from . import arithmetic
from .factory import HSL, RGB
from .hsl import HSLColor
from .rgb import RGBColor
from .validators import as_color, is_hex, is_hsl, is_rgb

logger = logging.getLogger(__name__)


class LiveColor:
    """
    Mutable RGB color with HSL and HEX views.

    Args:
        values: Channel sequence in ``mode`` (missing channels default as in
            :func:`RGB` / :func:`HSL`), or a hex string. Anything else is
            handed to :meth:`set`, so a color or a single gray level works too
        mode: "rgb", "hsl" or "hex"; also the default rendering mode
        ranges: Registry giving the channel scales
    """

    __slots__ = ("_r", "_g", "_b", "_a", "_mode", "_ranges")

    def __init__(
        self,
        values: Any = (),
        mode: str = "rgb",
        ranges: Optional[RangeRegistry] = None,
    ) -> None:
        self._ranges = resolve_ranges(ranges)
        self._mode: ColorMode = normalize_mode(mode)
        self._r: float = 0
        self._g: float = 0
        self._b: float = 0
        self._a: float = self._ranges.a

        if isinstance(values, str):
            self.set_hex(values)
        elif not isinstance(values, Sequence):
            self.set(values)
        elif self._mode == "hsl":
            self.set_hsl(HSL(*values[:4], constrain=True, ranges=self._ranges))
        elif self._mode == "hex":
            logger.debug("LiveColor: hex mode expects a hex string, got %r", values)
        else:
            self.set_rgb(RGB(*values[:4], constrain=True, ranges=self._ranges))

    # ------------------ CHANNELS ------------------
    def _clamped(self, name: str, value: Any, maximum: float) -> Optional[float]:
        if not is_number(value):
            logger.debug("LiveColor.%s: ignoring non-numeric value %r", name, value)
            return None
        return constrain(value, 0, maximum)

    @property
    def r(self) -> float:
        return self._r

    @r.setter
    def r(self, value: float) -> None:
        v = self._clamped("r", value, self._ranges.rgb)
        if v is not None:
            self._r = v

    @property
    def g(self) -> float:
        return self._g

    @g.setter
    def g(self, value: float) -> None:
        v = self._clamped("g", value, self._ranges.rgb)
        if v is not None:
            self._g = v

    @property
    def b(self) -> float:
        return self._b

    @b.setter
    def b(self, value: float) -> None:
        v = self._clamped("b", value, self._ranges.rgb)
        if v is not None:
            self._b = v

    @property
    def a(self) -> float:
        return self._a

    @a.setter
    def a(self, value: float) -> None:
        v = self._clamped("a", value, self._ranges.a)
        if v is not None:
            self._a = v

    @property
    def mode(self) -> ColorMode:
        return self._mode

    @mode.setter
    def mode(self, value: str) -> None:
        self._mode = normalize_mode(value)

    @property
    def ranges(self) -> RangeRegistry:
        return self._ranges

    # ------------------ VIEWS ------------------
    @property
    def rgb(self) -> RGBColor:
        return RGBColor(self._r, self._g, self._b, self._a)

    @property
    def hsl(self) -> HSLColor:
        return to_hsl(self.rgb, ranges=self._ranges)

    @property
    def hex(self) -> HexString:
        return to_hex(self.rgb, ranges=self._ranges)

    # ------------------ SETTERS ------------------
    def set_rgb(self, color: Any) -> None:
        if not is_rgb(color):
            logger.debug("LiveColor.set_rgb: %r is not an RGB color", color)
            return
        c = as_color(color, self._ranges)
        self.r, self.g, self.b, self.a = c.r, c.g, c.b, c.a

    def set_hsl(self, color: Any) -> None:
        if not is_hsl(color):
            logger.debug("LiveColor.set_hsl: %r is not an HSL color", color)
            return
        self.set_rgb(hsl_to_rgb(color, ranges=self._ranges))

    def set_hex(self, color: Any) -> None:
        if not is_hex(color):
            logger.debug("LiveColor.set_hex: %r is not a hex color", color)
            return
        self.set_rgb(hex_to_rgb(color, ranges=self._ranges))

    def set(self, value: Any) -> None:
        """
        Auto-detecting setter.

        Accepts an HSL, RGB or hex color, a channel sequence ``(r, g, b[, a])``
        or a single number for a gray.
        """
        if is_hsl(value):
            self.set_hsl(value)
        elif is_rgb(value):
            self.set_rgb(value)
        elif is_hex(value):
            self.set_hex(value)
        elif isinstance(value, Sequence) and not isinstance(value, str) and len(value) > 0:
            self.set_rgb(RGB(*value[:4], ranges=self._ranges))
        elif is_number(value):
            self.set_rgb(RGB(value, ranges=self._ranges))
        else:
            logger.debug("LiveColor.set: cannot interpret %r", value)

    # ------------------ IN-PLACE OPERATIONS ------------------
    def invert(self) -> None:
        self.set_rgb(arithmetic.invert(self.rgb, ranges=self._ranges))

    def add(self, operand: Any) -> None:
        """Add in HSL space for HSL operands, in RGB space otherwise."""
        if is_hsl(operand):
            self.set_hsl(arithmetic.add(self.hsl, operand, ranges=self._ranges))
        else:
            self.set_rgb(arithmetic.add(self.rgb, operand, ranges=self._ranges))

    def sub(self, operand: Any) -> None:
        self.set_rgb(arithmetic.sub(self.rgb, operand, ranges=self._ranges))

    def multiply(self, operand: Any) -> None:
        self.set_rgb(arithmetic.multiply(self.rgb, operand, ranges=self._ranges))

    def contrast_curve(self, strength: float = curves.DEFAULT_STRENGTH) -> None:
        self.set_rgb(curves.contrast_curve(self.rgb, strength, ranges=self._ranges))

    def color_curve(self, strength: StrengthLike = curves.DEFAULT_STRENGTH) -> None:
        self.set_rgb(curves.color_curve(self.rgb, strength, ranges=self._ranges))

    def brightness_curve(self, strength: float = curves.DEFAULT_STRENGTH) -> None:
        self.set_rgb(curves.brightness_curve(self.rgb, strength, ranges=self._ranges))

    # ------------------ CLONING ------------------
    def clone(self) -> LiveColor:
        c = LiveColor((self._r, self._g, self._b, self._a), "rgb", self._ranges)
        c.mode = self._mode
        return c

    def clone_inverted(self) -> LiveColor:
        c = self.clone()
        c.invert()
        return c

    # ------------------ RENDERING ------------------
    def to_string(self, mode: Optional[str] = None) -> str:
        m = normalize_mode(mode) if mode else self._mode
        if m == "hsl":
            return to_string(self.hsl, ranges=self._ranges)
        if m == "hex":
            return self.hex
        return to_string(self.rgb, ranges=self._ranges)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"LiveColor(r={self._r!r}, g={self._g!r}, b={self._b!r}, "
            f"a={self._a!r}, mode={self._mode!r})"
        )
