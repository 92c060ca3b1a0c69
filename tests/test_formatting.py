import pytest

from chromakit import HSL, RGB, hsl_to_string, rgb_to_string, to_string


@pytest.mark.parametrize("color, expected", [
    (RGB(255, 0, 0), "rgb(255, 0, 0)"),
    (RGB(255, 0, 0, 0.5), "rgba(255, 0, 0, 0.5)"),
    (RGB(12.5, 0.4, 254.6), "rgb(13, 0, 255)"),
    (RGB(0, 0, 0, 0), "rgba(0, 0, 0, 0)"),
    (RGB(0, 0, 0, 0.33333), "rgba(0, 0, 0, 0.333)"),
    (HSL(120, 100, 50), "hsl(120, 100%, 50%)"),
    (HSL(210.4, 50.5, 39.6, 0.25), "hsla(210, 51%, 40%, 0.25)"),
    (HSL(359.7, 0, 0), "hsl(0, 0%, 0%)"),
])
def test_to_string(color, expected):
    assert to_string(color) == expected


def test_hex_verbatim():
    assert to_string("#ABC") == "#ABC"
    assert to_string("#ff000080") == "#ff000080"


def test_mapping_input():
    assert to_string({"h": 0, "s": 100, "l": 50}) == "hsl(0, 100%, 50%)"


def test_non_color_renders_black_hex():
    assert to_string(None) == "#000000"
    assert to_string("red") == "#000000"


def test_alpha_normalized_for_percentage_profile(percent_ranges):
    assert to_string(RGB(1, 2, 3, 50, ranges=percent_ranges), ranges=percent_ranges) == "rgba(1, 2, 3, 0.5)"
    assert to_string(RGB(1, 2, 3, ranges=percent_ranges), ranges=percent_ranges) == "rgb(1, 2, 3)"


def test_direct_formatters():
    assert rgb_to_string(RGB(1, 2, 3)) == "rgb(1, 2, 3)"
    assert hsl_to_string(HSL(1, 2, 3, 0.1)) == "hsla(1, 2%, 3%, 0.1)"


def test_direct_formatters_reject_non_colors():
    assert rgb_to_string(None) == "#000000"
    assert rgb_to_string(HSL(0, 100, 50)) == "#000000"
    assert hsl_to_string("#ff0000") == "#000000"
    assert hsl_to_string(RGB(1, 2, 3)) == "#000000"
    assert rgb_to_string({"r": 1, "g": 2, "b": 3}) == "rgb(1, 2, 3)"


def test_infinite_channels_render_as_defaults():
    assert to_string(RGB(float("inf"), 0, 0)) == "rgb(0, 0, 0)"
    assert to_string({"r": float("inf"), "g": 0, "b": 0}) == "#000000"
