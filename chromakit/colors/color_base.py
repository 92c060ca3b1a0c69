from __future__ import annotations
from typing import Any, ClassVar, Dict, Iterator, Tuple

from ..types.color_types import ChannelKey, ColorKind, Scalar, ScalarVector
from ..utils.num_utils import is_number


class ColorBase:
    """
    Immutable, tagged color value.

    Subclasses declare ``kind`` (the discriminating tag) and ``channels``
    (channel keys in storage order, alpha last). Values are stored exactly as
    given; range enforcement is the job of :func:`chromakit.constrain`.
    """
    __slots__ = ('_value', '_is_frozen')  # no new attributes -> immutability

    kind:       ClassVar[ColorKind]
    channels:   ClassVar[Tuple[ChannelKey, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, *values: Scalar) -> None:
        if len(values) != len(self.channels):
            raise ValueError(
                f"{self.kind} expects {len(self.channels)} channels "
                f"({', '.join(self.channels)}), got {len(values)}"
            )
        for key, v in zip(self.channels, values):
            if not is_number(v):
                raise TypeError(f"{self.kind} channel '{key}' must be a finite real number, got {v!r}")

        self._value = tuple(values)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def a(self) -> Scalar:
        return self._value[-1]

    def channel(self, key: str) -> Scalar:
        try:
            return self._value[self.channels.index(key)]  # type: ignore[arg-type]
        except ValueError:
            raise KeyError(f"{self.kind} has no channel {key!r}") from None

    def as_dict(self) -> Dict[str, Scalar]:
        return dict(zip(self.channels, self._value))

    def replace(self, **changes: Scalar) -> ColorBase:
        """Return a copy with some channels replaced."""
        unknown = set(changes) - set(self.channels)
        if unknown:
            raise KeyError(f"{self.kind} has no channel(s) {sorted(unknown)}")
        values = self.as_dict()
        values.update(changes)
        return self.__class__(*(values[k] for k in self.channels))

    def with_alpha(self, alpha: Scalar) -> ColorBase:
        return self.replace(a=alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.kind == other.kind and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.kind, self._value))

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v!r}" for k, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({body})"

    def __str__(self) -> str:
        from ..formatting import to_string
        return to_string(self)

    # ------------------ PICKLING ------------------
    def __reduce__(self):
        return (self.__class__, self._value)
