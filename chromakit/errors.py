"""Exceptions raised by chromakit.

Pure conversion and arithmetic functions never raise for malformed colors,
they fall back to neutral defaults. Only programmer errors end up here.
"""


class ChromakitError(Exception):
    """Base class for every chromakit error."""


class InvalidChannelError(ChromakitError, KeyError):
    """Raised when a channel key is not one of ``r, g, b, h, s, l, a``."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "invalid channel"


class RangeConfigError(ChromakitError, ValueError):
    """Raised when a channel maximum is not a positive integer."""
