import numpy as np

from chromakit import HSL, HSLColor, RGBColor
from chromakit.conversions import hsl_to_rgb, hsl_to_unit_rgb, np_hsl_to_rgb, np_hsl_to_unit_rgb
from tests.samples import samples_rgb_hsl


def test_hsl_to_rgb():
    for (r_exp, g_exp, b_exp), hsl in samples_rgb_hsl.items():
        rgb = hsl_to_rgb(HSLColor(*hsl))
        assert isinstance(rgb, RGBColor)
        assert abs(rgb.r - r_exp) < 0.5
        assert abs(rgb.g - g_exp) < 0.5
        assert abs(rgb.b - b_exp) < 0.5


def test_known_vectors():
    assert hsl_to_rgb(HSL(120, 100, 50)) == RGBColor(0, 255, 0)
    assert hsl_to_rgb(HSL(0, 100, 50)) == RGBColor(255, 0, 0)
    assert hsl_to_rgb(HSL(240, 100, 50)) == RGBColor(0, 0, 255)
    assert hsl_to_rgb(HSL(0, 0, 100)) == RGBColor(255, 255, 255)


def test_sector_boundaries():
    # each boundary hue belongs to the sector it starts
    assert hsl_to_rgb(HSL(60, 100, 50)) == RGBColor(255, 255, 0)
    assert hsl_to_rgb(HSL(180, 100, 50)) == RGBColor(0, 255, 255)
    assert hsl_to_rgb(HSL(300, 100, 50)) == RGBColor(255, 0, 255)


def test_hue_is_wrapped():
    assert hsl_to_rgb(HSL(480, 100, 50)) == hsl_to_rgb(HSL(120, 100, 50))
    assert hsl_to_rgb(HSL(-240, 100, 50)) == hsl_to_rgb(HSL(120, 100, 50))
    assert hsl_to_rgb(HSL(360, 100, 50)) == hsl_to_rgb(HSL(0, 100, 50))


def test_output_is_clamped():
    rgb = hsl_to_rgb(HSL(0, 150, 120))
    assert all(0 <= v <= 255 for v in (rgb.r, rgb.g, rgb.b))


def test_alpha_passes_through():
    assert hsl_to_rgb(HSL(0, 100, 50, 0.3)).a == 0.3


def test_non_color_gives_default():
    assert hsl_to_rgb([0, 100, 50]) == RGBColor(0, 0, 0, 1)


def test_rgb_and_hex_input():
    assert hsl_to_rgb(RGBColor(1, 2, 3)) == RGBColor(1, 2, 3)
    assert hsl_to_rgb("#00ff00") == RGBColor(0, 255, 0)


def test_hsl_to_unit_rgb_numpy():
    hsl = np.array(list(samples_rgb_hsl.values()), dtype=float)
    h, s, l = hsl[..., 0], hsl[..., 1] / 100, hsl[..., 2] / 100
    expected = np.array([hsl_to_unit_rgb(*row) for row in zip(h, s, l)])
    assert np.allclose(np_hsl_to_unit_rgb(h, s, l), expected)


def test_hsl_to_rgb_numpy():
    hsl = np.array(list(samples_rgb_hsl.values()), dtype=float)
    expected = np.array(list(samples_rgb_hsl.keys()), dtype=float)
    result = np_hsl_to_rgb(hsl)
    assert result.shape == hsl.shape
    assert np.allclose(result, expected, atol=0.5)


def test_infinite_hue_is_treated_as_missing():
    assert hsl_to_rgb(HSL(float("inf"), 100, 50)) == RGBColor(255, 0, 0, 1)
    assert hsl_to_rgb({"h": float("inf"), "s": 100, "l": 50}) == RGBColor(0, 0, 0, 1)
