"""Colour maths - gradients, interpolation and fast HSV conversion."""

from __future__ import annotations
import math
import random
from typing import Optional, TypeVar, Union

from .config import HEATMAP_STOPS
from .math_utils import trunc_div
from .types import Color, ColorAlpha, ColorHSV

AnyColor = TypeVar("AnyColor", Color, ColorAlpha)


def _channel(a: int, b: int, t: float) -> int:
    """Interpolate one 8-bit channel, truncating toward zero and clamping."""
    value = int(a + (b - a) * t)
    return 0 if value < 0 else 255 if value > 255 else value


def heatmap(val: float) -> Color:
    """Map a normalized value in [0, 1] onto a 7-stop heatmap gradient.

    Values below 0 give black, values at or above 1 give white.
    Source: https://andrewnoske.com/wiki/Code_-_heatmaps_and_color_gradients
    """
    last = len(HEATMAP_STOPS) - 1
    frac = 0.0
    if val < 0.0:
        i1 = i2 = 0
    elif val >= 1.0:
        i1 = i2 = last
    else:
        val *= last
        i1 = int(math.floor(val))
        i2 = i1 + 1
        frac = val - i1

    c1 = HEATMAP_STOPS[i1]
    c2 = HEATMAP_STOPS[i2]
    return Color(*(_channel(a, b, frac) for a, b in zip(c1, c2)))


def linear_color(percent: float, c1: AnyColor, c2: AnyColor) -> AnyColor:
    """Color `percent` of the way from c1 to c2 (percent in [0, 1]).

    Works for Color and ColorAlpha; alpha is interpolated as well.
    """
    if type(c1) is not type(c2):
        raise TypeError(f"cannot interpolate {type(c1).__name__} with {type(c2).__name__}")
    channels = [_channel(a, b, percent) for a, b in zip(c1.as_tuple(), c2.as_tuple())]
    return type(c1)(*channels)


def random_color(c1: AnyColor, c2: AnyColor, rng: Optional[random.Random] = None) -> AnyColor:
    """Random color linearly interpolated between c1 and c2."""
    t = (rng or random).random()
    return linear_color(t, c1, c2)


def hsv_to_rgb(hsv: ColorHSV) -> Color:
    """Quickly (not exactly) convert an 8-bit HSV color to RGB.

    Integer-only algorithm: the hue circle is split into six regions of 43.
    Source: https://stackoverflow.com/questions/3018313
    """
    h, s, v = hsv.h & 0xFF, hsv.s & 0xFF, hsv.v & 0xFF
    if s == 0:
        return Color(v, v, v)

    region = h // 43
    remainder = (h - region * 43) * 6

    p = (v * (255 - s)) >> 8
    q = (v * (255 - ((s * remainder) >> 8))) >> 8
    t = (v * (255 - ((s * (255 - remainder)) >> 8))) >> 8

    if region == 0:
        return Color(v, t, p)
    elif region == 1:
        return Color(q, v, p)
    elif region == 2:
        return Color(p, v, t)
    elif region == 3:
        return Color(p, q, v)
    elif region == 4:
        return Color(t, p, v)
    return Color(v, p, q)


def rgb_to_hsv(rgb: Union[Color, ColorAlpha]) -> ColorHSV:
    """Quickly (not exactly) convert an 8-bit RGB color to HSV.

    Alpha, if present, is ignored. Hue wraps into 0..255.
    Source: https://stackoverflow.com/questions/3018313
    """
    r, g, b = rgb.r & 0xFF, rgb.g & 0xFF, rgb.b & 0xFF
    rgb_min = min(r, g, b)
    rgb_max = max(r, g, b)

    v = rgb_max
    if v == 0:
        return ColorHSV(0, 0, 0)

    s = 255 * (rgb_max - rgb_min) // v
    if s == 0:
        return ColorHSV(0, 0, v)

    delta = rgb_max - rgb_min
    if rgb_max == r:
        h = 0 + trunc_div(43 * (g - b), delta)
    elif rgb_max == g:
        h = 85 + trunc_div(43 * (b - r), delta)
    else:
        h = 171 + trunc_div(43 * (r - g), delta)

    return ColorHSV(h & 0xFF, s, v)
