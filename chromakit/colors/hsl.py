from typing import ClassVar, Tuple
from ..types.color_types import ChannelKey, ColorKind, HSL_CHANNELS, Scalar
from .color_base import ColorBase


class HSLColor(ColorBase):
    """
    Cylindrical color: ``h`` in [0, 360) (cyclic), ``s`` and ``l`` in
    [0, 100], ``a`` in [0, A_RANGE].
    """
    __slots__ = ()

    kind:       ClassVar[ColorKind] = "hsl"
    channels:   ClassVar[Tuple[ChannelKey, ...]] = HSL_CHANNELS

    def __init__(self, h: Scalar, s: Scalar, l: Scalar, a: Scalar = 1) -> None:
        super().__init__(h, s, l, a)

    @property
    def h(self) -> Scalar:
        return self._value[0]

    @property
    def s(self) -> Scalar:
        return self._value[1]

    @property
    def l(self) -> Scalar:
        return self._value[2]
