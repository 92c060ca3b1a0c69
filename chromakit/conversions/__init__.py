"""
Chromakit Color Conversions
===========================

Bidirectional RGB <-> HSL <-> HEX conversions. RGB is the pivot: HSL and HEX
never convert into each other directly.

Conversion Functions
--------------------

RGB -> HSL:
    rgb_to_hsl(color)
        Scalar conversion of a color variant, registry units
    unit_rgb_to_hsl(r, g, b)
        Normalized channels in, (degrees, [0,1], [0,1]) out
    np_rgb_to_hsl(rgb) / np_unit_rgb_to_hsl(r, g, b)
        Vectorized equivalents

HSL -> RGB:
    hsl_to_rgb(color)
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_rgb(hsl) / np_hsl_to_unit_rgb(h, s, l)

HEX:
    rgb_to_hex, hex_to_rgb, hsl_to_hex, hex_to_hsl, expand_hex

High-Level API
--------------
    to_rgb(color), to_hsl(color), to_hex(color)
        Detect the input variant and pivot as needed
    convert(color, to_mode)
        Dispatch on a mode name

Examples
--------
>>> from chromakit.conversions import rgb_to_hsl, rgb_to_hex
>>> from chromakit import RGB
>>> rgb_to_hsl(RGB(255, 0, 0))
HSLColor(h=0.0, s=100.0, l=50.0, a=1)
>>> rgb_to_hex(RGB(255, 0, 0))
'#ff0000'
"""

# RGB -> HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    rgb_to_hsl,
    np_unit_rgb_to_hsl,
    np_rgb_to_hsl,
)

# HSL -> RGB conversions
from .to_rgb import (
    normalize_hue,
    hsl_to_unit_rgb,
    hsl_to_rgb,
    np_hsl_to_unit_rgb,
    np_hsl_to_rgb,
)

# HEX conversions
from .hex import (
    DEFAULT_HEX,
    expand_hex,
    rgb_to_hex,
    hex_to_rgb,
    hsl_to_hex,
    hex_to_hsl,
)

# High-level API
from .wrapper import detect_mode, to_rgb, to_hsl, to_hex, convert

__all__ = [
    # RGB -> HSL
    'unit_rgb_to_hsl',
    'rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSL -> RGB
    'normalize_hue',
    'hsl_to_unit_rgb',
    'hsl_to_rgb',
    'np_hsl_to_unit_rgb',
    'np_hsl_to_rgb',

    # HEX
    'DEFAULT_HEX',
    'expand_hex',
    'rgb_to_hex',
    'hex_to_rgb',
    'hsl_to_hex',
    'hex_to_hsl',

    # High-level API
    'detect_mode',
    'to_rgb',
    'to_hsl',
    'to_hex',
    'convert',
]
