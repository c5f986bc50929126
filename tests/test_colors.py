import random

import pytest

from alexandria.colors import heatmap, hsv_to_rgb, linear_color, random_color, rgb_to_hsv
from alexandria.types import Color, ColorAlpha, ColorHSV


def test_color_str():
    assert str(Color(1, 2, 3)) == "(1, 2, 3)"
    assert str(ColorAlpha(1, 2, 3, 4)) == "(1, 2, 3, 4)"
    assert str(ColorHSV(10, 20, 30)) == "(10, 20, 30)"


def test_color_alpha_float_transport():
    # bytes 00 00 80 3f are 1.0f in little-endian IEEE-754
    c = ColorAlpha(0, 0, 128, 63)
    assert c.to_float() == 1.0
    assert ColorAlpha.from_float(1.0) == c
    original = ColorAlpha(12, 34, 56, 64)
    assert ColorAlpha.from_float(original.to_float()) == original


def test_color_alpha_float_masks_out_of_range_channels():
    assert ColorAlpha(256, 0, 128 + 512, 63).to_float() == 1.0
    assert ColorAlpha(-1, 0, 0, 0).to_float() == ColorAlpha(255, 0, 0, 0).to_float()


@pytest.mark.parametrize("val,expected", [
    (-0.5, Color(0, 0, 0)),
    (0.0, Color(0, 0, 0)),
    (1.0, Color(255, 255, 255)),
    (3.0, Color(255, 255, 255)),
    (0.5, Color(0, 255, 0)),
])
def test_heatmap_stops(val, expected):
    assert heatmap(val) == expected


def test_heatmap_interpolates_between_stops():
    # 1/12 is halfway between black and blue
    assert heatmap(1.0 / 12.0) == Color(0, 0, 127)


def test_linear_color():
    assert linear_color(0.5, Color(0, 0, 0), Color(200, 100, 50)) == Color(100, 50, 25)
    assert linear_color(0.0, Color(9, 9, 9), Color(0, 0, 0)) == Color(9, 9, 9)
    mixed = linear_color(0.25, ColorAlpha(0, 0, 0, 0), ColorAlpha(100, 100, 100, 200))
    assert mixed == ColorAlpha(25, 25, 25, 50)


def test_linear_color_rejects_mixed_types():
    with pytest.raises(TypeError):
        linear_color(0.5, Color(), ColorAlpha())


def test_random_color_within_bounds():
    rng = random.Random(42)
    for _ in range(20):
        c = random_color(Color(10, 20, 30), Color(20, 40, 60), rng=rng)
        assert 10 <= c.r <= 20
        assert 20 <= c.g <= 40
        assert 30 <= c.b <= 60


def test_hsv_gray_and_black():
    assert hsv_to_rgb(ColorHSV(123, 0, 77)) == Color(77, 77, 77)
    assert rgb_to_hsv(Color(0, 0, 0)) == ColorHSV(0, 0, 0)
    assert rgb_to_hsv(Color(50, 50, 50)) == ColorHSV(0, 0, 50)


def test_primary_colors_to_hsv():
    assert rgb_to_hsv(Color(255, 0, 0)) == ColorHSV(0, 255, 255)
    assert rgb_to_hsv(Color(0, 255, 0)) == ColorHSV(85, 255, 255)
    assert rgb_to_hsv(Color(0, 0, 255)) == ColorHSV(171, 255, 255)


def test_negative_hue_wraps():
    # 43 * (0 - 128) / 255 truncates to -21, which wraps to 235
    assert rgb_to_hsv(Color(255, 0, 128)) == ColorHSV(235, 255, 255)


def test_hsv_to_rgb_red():
    assert hsv_to_rgb(ColorHSV(0, 255, 255)) == Color(255, 0, 0)


@pytest.mark.parametrize("rgb", [
    Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255),
    Color(200, 100, 50), Color(30, 180, 90), Color(90, 60, 220),
])
def test_fast_round_trip_is_approximate(rgb):
    back = hsv_to_rgb(rgb_to_hsv(rgb))
    for a, b in zip(rgb.as_tuple(), back.as_tuple()):
        assert abs(a - b) <= 12
