from typing import ClassVar, Tuple
from ..types.color_types import ChannelKey, ColorKind, RGB_CHANNELS, Scalar
from .color_base import ColorBase


class RGBColor(ColorBase):
    """Device-space color: ``r, g, b`` in [0, 255], ``a`` in [0, A_RANGE]."""
    __slots__ = ()

    kind:       ClassVar[ColorKind] = "rgb"
    channels:   ClassVar[Tuple[ChannelKey, ...]] = RGB_CHANNELS

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Scalar = 1) -> None:
        super().__init__(r, g, b, a)

    @property
    def r(self) -> Scalar:
        return self._value[0]

    @property
    def g(self) -> Scalar:
        return self._value[1]

    @property
    def b(self) -> Scalar:
        return self._value[2]
