"""
Chromakit Color Variants
========================

Immutable, tagged color values.

- ``RGBColor`` (``kind == "rgb"``): r, g, b in [0, 255], alpha
- ``HSLColor`` (``kind == "hsl"``): h in [0, 360), s, l in [0, 100], alpha
- HEX is not a class: hex strings are always derived from or decoded to an
  ``RGBColor``.

Instances are frozen after ``__init__`` and compare by tag and channel
values. Channel values are stored as given; :func:`chromakit.constrain`
brings them into range.

>>> from chromakit.colors import RGBColor
>>> c = RGBColor(255, 128, 0)
>>> c.r, c.a
(255, 1)
>>> c.kind
'rgb'
"""

from .color_base import ColorBase
from .rgb import RGBColor
from .hsl import HSLColor
from .validators import is_rgb, is_hsl, is_hex, is_color, as_color


__all__ = ['ColorBase', 'RGBColor', 'HSLColor', 'is_rgb', 'is_hsl', 'is_hex', 'is_color', 'as_color']
