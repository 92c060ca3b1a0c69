import pytest

from chromakit import HSL, RGB, HSLColor, RGBColor, constrain, round_color


def test_constrain_rgb():
    assert constrain(RGB(300, -1, 12.5, 3)) == RGBColor(255, 0, 12.5, 1)


def test_constrain_hsl_wraps_hue():
    assert constrain(HSL(370, 50, 50)) == HSLColor(10, 50, 50)
    assert constrain(HSL(-10, 50, 50)) == HSLColor(350, 50, 50)
    assert constrain(HSL(360, 50, 50)).h == 0
    assert constrain(HSL(-720, 50, 50)).h == 0


def test_constrain_clamps_saturation_lightness_alpha():
    assert constrain(HSL(0, 120, -3, -0.5)) == HSLColor(0, 100, 0, 0)


def test_constrain_mapping_returns_tagged():
    result = constrain({"r": 300, "g": 0, "b": 0})
    assert isinstance(result, RGBColor)
    assert result == RGBColor(255, 0, 0, 1)


def test_constrain_hex():
    assert constrain("#FFF") == "#ffffff"
    assert constrain("#ff000080") == "#ff000080"


def test_constrain_passthrough():
    assert constrain(None) is None
    assert constrain("red") == "red"


@pytest.mark.parametrize("color", [
    RGB(300, -20, 127.3, 2),
    HSL(725.5, 101, -1, 0.5),
    RGB(0, 0, 0),
    "#abcdef",
])
def test_constrain_idempotent(color):
    once = constrain(color)
    assert constrain(once) == once


def test_constrain_percentage_alpha(percent_ranges):
    assert constrain(RGB(0, 0, 0, 150), ranges=percent_ranges).a == 100
    assert constrain(RGB(0, 0, 0, 50), ranges=percent_ranges).a == 50


def test_round_to_integers():
    assert round_color(RGB(12.5, 12.49, 0.5)) == RGBColor(13, 12, 1, 1)
    c = round_color(HSL(210.4, 50.5, 39.6))
    assert c == HSLColor(210, 51, 40, 1)
    assert all(isinstance(v, int) for v in c.value[:3])


def test_round_keeps_alpha_precision():
    assert round_color(RGB(0, 0, 0, 0.4567)).a == 0.457
    assert round_color(RGB(0, 0, 0, 0.4567), preserve_fraction=True).a == 0.457


def test_round_preserve_fraction():
    c = round_color(HSL(210.44, 50.56, 39.64), preserve_fraction=True)
    assert c == HSLColor(210, 50.6, 39.6, 1)
    # rgb range is wider than 100: integers
    assert round_color(RGB(12.7, 0, 0), preserve_fraction=True).r == 13


def test_round_wraps_hue():
    assert round_color(HSL(359.6, 10, 10)).h == 0


def test_round_idempotent():
    for color in (RGB(1.5, 2.5, 3.5, 0.3333), HSL(359.5, 33.33, 66.66, 0.9999)):
        for preserve_fraction in (False, True):
            once = round_color(color, preserve_fraction=preserve_fraction)
            assert round_color(once, preserve_fraction=preserve_fraction) == once


def test_round_hex_and_passthrough():
    assert round_color("#ABC") == "#aabbcc"
    assert round_color(3.7) == 3.7


def test_infinite_channels():
    inf = float("inf")
    assert constrain(HSL(inf, 50, 50)) == HSLColor(0, 50, 50, 1)
    assert round_color(RGB(inf, 0, 0)) == RGBColor(0, 0, 0, 1)
    assert constrain({"r": inf, "g": 0, "b": 0}) == {"r": inf, "g": 0, "b": 0}
