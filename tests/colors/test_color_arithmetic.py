import numpy as np
import pytest

from chromakit import HSL, RGB, HSLColor, RGBColor, add, invert, multiply, sub


def test_rgb_addition_clamps():
    assert add(RGB(250, 10, 0), RGB(10, 10, 10)) == RGBColor(255, 20, 10, 1)
    assert RGB(250, 10, 0) + RGB(10, 10, 10) == RGBColor(255, 20, 10, 1)


def test_hsl_addition_wraps_hue():
    result = add(HSL(350, 0, 0), HSL(20, 0, 0))
    assert isinstance(result, HSLColor)
    assert result.h == 10
    assert (HSL(350, 0, 0) + HSL(20, 0, 0)).h == 10


def test_hsl_addition_clamps_saturation_and_lightness():
    assert add(HSL(10, 90, 5), HSL(0, 20, -10)) == HSLColor(10, 100, 0, 1)


def test_partial_operand_means_no_change():
    assert add(HSL(0, 50, 50), {"l": 10}) == HSLColor(0, 50, 60, 1)
    assert add(RGB(10, 20, 30), {"g": 5}) == RGBColor(10, 25, 30, 1)
    assert sub(RGB(100, 100, 100), {"g": 50}) == RGBColor(100, 50, 100, 1)
    assert multiply(RGB(100, 50, 200), {"r": 0.5}) == RGBColor(50, 50, 200, 1)


def test_addition_converts_operand():
    # HSL operand added to an RGB color is converted to RGB first
    assert add(RGB(0, 0, 0), HSL(0, 100, 50)) == RGBColor(255, 0, 0, 1)
    assert add("#100000", RGB(16, 0, 0)) == "#200000"


def test_scalar_addition_broadcasts():
    assert add(RGB(10, 20, 30), 5) == RGBColor(15, 25, 35, 1)
    result = add(HSL(0, 100, 25), 10)
    assert isinstance(result, HSLColor)


def test_addition_keeps_first_alpha():
    assert add(RGB(1, 2, 3, 0.5), RGB(1, 1, 1, 1)).a == 0.5


def test_add_non_color():
    assert add(None, RGB(1, 2, 3)) == RGBColor(1, 2, 3, 1)
    assert add({"r": 1, "g": 2}, {"r": 1, "g": 2, "b": 3}) == RGBColor(1, 2, 3, 1)
    assert add(None, 5) is None
    assert add(RGB(1, 2, 3), "garbage") == RGBColor(1, 2, 3, 1)


def test_subtraction():
    assert sub(RGB(100, 100, 100), 30) == RGBColor(70, 70, 70, 1)
    assert sub(RGB(10, 10, 10), RGB(20, 0, 5)) == RGBColor(0, 10, 5, 1)
    assert RGB(10, 10, 10) - 5 == RGBColor(5, 5, 5, 1)
    assert sub("#ffffff", RGB(255, 0, 0)) == "#00ffff"
    assert sub(None, 3) is None


def test_subtraction_keeps_hsl_variant():
    result = sub(HSL(0, 100, 50), RGB(0, 0, 0))
    assert isinstance(result, HSLColor)
    assert np.allclose(result.value, (0, 100, 50, 1))


def test_multiplication():
    assert multiply(RGB(100, 50, 200), 2) == RGBColor(200, 100, 255, 1)
    assert multiply(RGB(100, 100, 100), RGB(2, 0, 1)) == RGBColor(200, 0, 100, 1)
    assert RGB(1, 2, 3) * 2 == RGBColor(2, 4, 6, 1)
    assert 2 * RGB(1, 2, 3) == RGBColor(2, 4, 6, 1)
    assert multiply("nope", 2) == "nope"


def test_invert():
    assert invert(RGB(255, 0, 100)) == RGBColor(0, 255, 155, 1)
    assert ~RGB(255, 0, 100) == RGBColor(0, 255, 155, 1)
    assert invert("#ff0000") == "#00ffff"
    assert invert(HSL(0, 100, 50)) == HSLColor(180, 100, 50, 1)
    assert invert(42) == 42


def test_invert_keeps_alpha():
    assert invert(RGB(0, 0, 0, 0.25)) == RGBColor(255, 255, 255, 0.25)


def test_invert_is_an_involution():
    for values in [(0, 0, 0), (255, 255, 255), (12, 200, 99), (1, 254, 128)]:
        c = RGBColor(*values)
        assert invert(invert(c)) == c


def test_unsupported_operand_type():
    with pytest.raises(TypeError):
        RGB(1, 2, 3) + [1, 2, 3]
    with pytest.raises(TypeError):
        RGB(1, 2, 3) * None


def test_percentage_alpha(percent_ranges):
    c = RGB(10, 10, 10, 40, ranges=percent_ranges)
    result = add(c, RGB(5, 5, 5, ranges=percent_ranges), ranges=percent_ranges)
    assert result == RGBColor(15, 15, 15, 40)
