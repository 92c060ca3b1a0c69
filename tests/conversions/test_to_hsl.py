import numpy as np

from chromakit import RGB, HSLColor, RGBColor
from chromakit.conversions import np_rgb_to_hsl, np_unit_rgb_to_hsl, rgb_to_hsl, unit_rgb_to_hsl
from tests.samples import samples_rgb_hsl


def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        hsl = rgb_to_hsl(RGBColor(r, g, b))
        assert isinstance(hsl, HSLColor)
        assert abs(hsl.h - h_exp) < 0.01
        assert abs(hsl.s - s_exp) < 0.01
        assert abs(hsl.l - l_exp) < 0.01
        assert hsl.a == 1


def test_known_vectors():
    assert rgb_to_hsl(RGB(255, 0, 0)) == HSLColor(0, 100, 50)
    assert rgb_to_hsl(RGB(128, 128, 128)).s == 0


def test_grays_use_red_branch():
    for v in (0, 1, 77, 254, 255):
        hsl = rgb_to_hsl(RGB(v))
        assert hsl.h == 0
        assert hsl.s == 0


def test_hue_in_range():
    # g < b with red maximum: the R branch must wrap, not clamp
    hsl = rgb_to_hsl(RGB(255, 0, 128))
    assert 0 <= hsl.h < 360
    assert abs(hsl.h - 329.882) < 0.01


def test_alpha_passes_through():
    assert rgb_to_hsl(RGB(10, 20, 30, 0.4)).a == 0.4


def test_accepts_mappings_and_other_variants():
    assert rgb_to_hsl({"r": 0, "g": 255, "b": 0}) == HSLColor(120, 100, 50)
    assert np.allclose(rgb_to_hsl("#0000ff").value, (240, 100, 50, 1))
    hsl = HSLColor(10, 20, 30)
    assert np.allclose(rgb_to_hsl(hsl).value, hsl.value, atol=0.5)


def test_non_color_gives_default():
    assert rgb_to_hsl(None) == HSLColor(0, 0, 0, 1)
    assert rgb_to_hsl("red") == HSLColor(0, 0, 0, 1)


def test_unit_rgb_to_hsl():
    h, s, l = unit_rgb_to_hsl(0.2, 0.4, 0.6)
    assert abs(h - 210) < 1e-9
    assert abs(s - 0.5) < 1e-9
    assert abs(l - 0.4) < 1e-9


def test_unit_rgb_to_hsl_numpy():
    rgb = np.array(list(samples_rgb_hsl.keys()), dtype=float) / 255
    expected = np.array([unit_rgb_to_hsl(*row) for row in rgb])
    result = np_unit_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert np.allclose(result, expected)


def test_rgb_to_hsl_numpy():
    rgb = np.array(list(samples_rgb_hsl.keys()), dtype=float)
    expected = np.array(list(samples_rgb_hsl.values()), dtype=float)
    result = np_rgb_to_hsl(rgb)
    assert result.shape == rgb.shape
    assert np.allclose(result, expected, atol=0.01)


def test_rgb_to_hsl_numpy_matches_scalar():
    gen = np.random.default_rng(0)
    rgb = gen.integers(0, 256, size=(8, 8, 3))
    result = np_rgb_to_hsl(rgb)
    for idx in np.ndindex(8, 8):
        scalar = rgb_to_hsl(RGBColor(*(int(v) for v in rgb[idx])))
        assert np.allclose(result[idx], scalar.value[:3])
