"""Chromakit: RGB/HSL/HEX color values, conversions and adjustments."""

__version__ = "0.1.0"

from .errors import ChromakitError, InvalidChannelError, RangeConfigError
from .config import (
    AlphaProfile,
    ChannelRange,
    RangeRegistry,
    DEFAULT_RANGES,
    range_of,
)
from .colors import (
    ColorBase,
    RGBColor,
    HSLColor,
    is_rgb,
    is_hsl,
    is_hex,
    is_color,
    as_color,
)
from .adjust.constrain import constrain, round_color
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hex,
    hex_to_rgb,
    hsl_to_hex,
    hex_to_hsl,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    to_rgb,
    to_hsl,
    to_hex,
    convert,
)
from .colors.factory import RGB, HSL, HEX, random_rgb, map_color
from .colors.arithmetic import add, sub, multiply, invert
from .adjust.curves import contrast_curve, color_curve, brightness_curve
from .formatting import to_string, rgb_to_string, hsl_to_string
from .colors.live import LiveColor
from .picker import PickerReadout, read_picker, contrasting_text_color

__all__ = [
    # errors
    "ChromakitError",
    "InvalidChannelError",
    "RangeConfigError",
    # configuration
    "AlphaProfile",
    "ChannelRange",
    "RangeRegistry",
    "DEFAULT_RANGES",
    "range_of",
    # color types and validators
    "ColorBase",
    "RGBColor",
    "HSLColor",
    "is_rgb",
    "is_hsl",
    "is_hex",
    "is_color",
    "as_color",
    # constructors
    "RGB",
    "HSL",
    "HEX",
    "random_rgb",
    "map_color",
    # constrain / round
    "constrain",
    "round_color",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
    "hsl_to_hex",
    "hex_to_hsl",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    "to_rgb",
    "to_hsl",
    "to_hex",
    "convert",
    # arithmetic and curves
    "add",
    "sub",
    "multiply",
    "invert",
    "contrast_curve",
    "color_curve",
    "brightness_curve",
    # formatting
    "to_string",
    "rgb_to_string",
    "hsl_to_string",
    # mutable wrapper and picker model
    "LiveColor",
    "PickerReadout",
    "read_picker",
    "contrasting_text_color",
]
