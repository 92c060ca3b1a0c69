"""
Picker readout model.

A color picker with hue, saturation and lightness sliders shows the picked
color as ``rgb()``, ``hsl()`` and hex strings, painted in a text color that
stays readable on top of it. :func:`read_picker` computes everything the
view needs from the three slider positions; the view itself is out of scope.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .adjust.constrain import constrain, round_color
from .colors.factory import HSL, random_rgb
from .colors.hsl import HSLColor
from .config.ranges import RangeRegistry, resolve_ranges
from .conversions.hex import rgb_to_hex
from .conversions.to_hsl import rgb_to_hsl
from .conversions.to_rgb import hsl_to_rgb
from .formatting import to_string

logger = logging.getLogger(__name__)

LIGHT_TEXT = "#ffffff"
DARK_TEXT = "#000000"


@dataclass(frozen=True)
class PickerReadout:
    color: HSLColor
    rgb: str
    hsl: str
    hex: str
    text_color: str

    @property
    def background(self) -> str:
        return self.hex


def contrasting_text_color(hsl: HSLColor, ranges: Optional[RangeRegistry] = None) -> str:
    """White text up to the lightness midpoint, black text above it."""
    rng = resolve_ranges(ranges)
    return LIGHT_TEXT if hsl.l <= rng.l / 2 else DARK_TEXT


def read_picker(h: float, s: float, l: float, ranges: Optional[RangeRegistry] = None) -> PickerReadout:
    """
    Build the readout for the slider positions ``(h, s, l)``.

    The HSL color is constrained and rounded, converted to RGB, and the hex
    string is encoded from the rounded RGB color.
    """
    rng = resolve_ranges(ranges)
    hsl = round_color(constrain(HSL(h, s, l, ranges=rng), rng), ranges=rng)
    rgb = hsl_to_rgb(hsl, ranges=rng)
    hex_string = rgb_to_hex(round_color(rgb, ranges=rng), ranges=rng)

    logger.debug("read_picker: (%r, %r, %r) -> %s", h, s, l, hex_string)
    return PickerReadout(
        color=hsl,
        rgb=to_string(rgb, ranges=rng),
        hsl=to_string(hsl, ranges=rng),
        hex=hex_string,
        text_color=contrasting_text_color(hsl, rng),
    )


def initial_slider_values(
    generator: Optional[np.random.Generator] = None,
    ranges: Optional[RangeRegistry] = None,
) -> HSLColor:
    """Random starting position for the sliders, as a rounded HSL color."""
    rng = resolve_ranges(ranges)
    return round_color(rgb_to_hsl(random_rgb(rng=generator, ranges=rng), ranges=rng), ranges=rng)
