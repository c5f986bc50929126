"""Easing curves from https://easings.net/.

Every function maps progress t in [0, 1] to an eased value that starts at 0
and ends at 1 (back and elastic curves overshoot in between). The
``Easing`` enum names each curve so callers can select one by name.
"""

from __future__ import annotations
import math
from enum import Enum
from typing import Callable, Dict, Union

from .config import (
    BOUNCE_D1,
    BOUNCE_N1,
    EASE_C1,
    EASE_C2,
    EASE_C3,
    EASE_C4,
    EASE_C5,
)

EasingFunc = Callable[[float], float]


def ease_linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out: decelerating to zero velocity."""
    return 1.0 - (1.0 - t) * (1.0 - t)


def ease_in_out_quad(t: float) -> float:
    return 2.0 * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out: acceleration until halfway, then deceleration."""
    return 4.0 * t * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    return 1.0 - (1.0 - t) ** 4


def ease_in_out_quart(t: float) -> float:
    return 8.0 * t ** 4 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 4 / 2.0


def ease_in_quint(t: float) -> float:
    return t ** 5


def ease_out_quint(t: float) -> float:
    return 1.0 - (1.0 - t) ** 5


def ease_in_out_quint(t: float) -> float:
    return 16.0 * t ** 5 if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 5 / 2.0


def ease_in_sine(t: float) -> float:
    return 1.0 - math.cos((t * math.pi) / 2.0)


def ease_out_sine(t: float) -> float:
    return math.sin((t * math.pi) / 2.0)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1.0) / 2.0


def ease_in_expo(t: float) -> float:
    return 0.0 if t == 0.0 else 2.0 ** (10.0 * t - 10.0)


def ease_out_expo(t: float) -> float:
    return 1.0 if t == 1.0 else 1.0 - 2.0 ** (-10.0 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if t < 0.5:
        return 2.0 ** (20.0 * t - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * t + 10.0)) / 2.0


def ease_in_circ(t: float) -> float:
    return 1.0 - math.sqrt(1.0 - t * t)


def ease_out_circ(t: float) -> float:
    return math.sqrt(1.0 - (t - 1.0) ** 2)


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1.0 - math.sqrt(1.0 - (2.0 * t) ** 2)) / 2.0
    return (math.sqrt(1.0 - (-2.0 * t + 2.0) ** 2) + 1.0) / 2.0


def ease_in_back(t: float) -> float:
    return EASE_C3 * t * t * t - EASE_C1 * t * t


def ease_out_back(t: float) -> float:
    return 1.0 + EASE_C3 * (t - 1.0) ** 3 + EASE_C1 * (t - 1.0) ** 2


def ease_in_out_back(t: float) -> float:
    if t < 0.5:
        return ((2.0 * t) ** 2 * ((EASE_C2 + 1.0) * 2.0 * t - EASE_C2)) / 2.0
    return ((2.0 * t - 2.0) ** 2 * ((EASE_C2 + 1.0) * (t * 2.0 - 2.0) + EASE_C2) + 2.0) / 2.0


def ease_in_elastic(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((t * 10.0 - 10.75) * EASE_C4)


def ease_out_elastic(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * EASE_C4) + 1.0


def ease_in_out_elastic(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if t < 0.5:
        return -(2.0 ** (20.0 * t - 10.0) * math.sin((20.0 * t - 11.125) * EASE_C5)) / 2.0
    return (2.0 ** (-20.0 * t + 10.0) * math.sin((20.0 * t - 11.125) * EASE_C5)) / 2.0 + 1.0


def ease_out_bounce(t: float) -> float:
    if t < 1.0 / BOUNCE_D1:
        return BOUNCE_N1 * t * t
    elif t < 2.0 / BOUNCE_D1:
        t -= 1.5 / BOUNCE_D1
        return BOUNCE_N1 * t * t + 0.75
    elif t < 2.5 / BOUNCE_D1:
        t -= 2.25 / BOUNCE_D1
        return BOUNCE_N1 * t * t + 0.9375
    t -= 2.625 / BOUNCE_D1
    return BOUNCE_N1 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1.0 - ease_out_bounce(1.0 - t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return (1.0 - ease_out_bounce(1.0 - 2.0 * t)) / 2.0
    return (1.0 + ease_out_bounce(2.0 * t - 1.0)) / 2.0


class Easing(Enum):
    """Named easing curves; calling a member evaluates its curve."""
    LINEAR = "linear"
    IN_QUAD = "in_quad"
    OUT_QUAD = "out_quad"
    IN_OUT_QUAD = "in_out_quad"
    IN_CUBIC = "in_cubic"
    OUT_CUBIC = "out_cubic"
    IN_OUT_CUBIC = "in_out_cubic"
    IN_QUART = "in_quart"
    OUT_QUART = "out_quart"
    IN_OUT_QUART = "in_out_quart"
    IN_QUINT = "in_quint"
    OUT_QUINT = "out_quint"
    IN_OUT_QUINT = "in_out_quint"
    IN_SINE = "in_sine"
    OUT_SINE = "out_sine"
    IN_OUT_SINE = "in_out_sine"
    IN_EXPO = "in_expo"
    OUT_EXPO = "out_expo"
    IN_OUT_EXPO = "in_out_expo"
    IN_CIRC = "in_circ"
    OUT_CIRC = "out_circ"
    IN_OUT_CIRC = "in_out_circ"
    IN_BACK = "in_back"
    OUT_BACK = "out_back"
    IN_OUT_BACK = "in_out_back"
    IN_ELASTIC = "in_elastic"
    OUT_ELASTIC = "out_elastic"
    IN_OUT_ELASTIC = "in_out_elastic"
    IN_BOUNCE = "in_bounce"
    OUT_BOUNCE = "out_bounce"
    IN_OUT_BOUNCE = "in_out_bounce"

    @property
    def func(self) -> EasingFunc:
        """The function implementing this curve."""
        return _CURVES[self]

    def __call__(self, t: float) -> float:
        return self.func(t)


_CURVES: Dict[Easing, EasingFunc] = {
    Easing.LINEAR: ease_linear,
    Easing.IN_QUAD: ease_in_quad,
    Easing.OUT_QUAD: ease_out_quad,
    Easing.IN_OUT_QUAD: ease_in_out_quad,
    Easing.IN_CUBIC: ease_in_cubic,
    Easing.OUT_CUBIC: ease_out_cubic,
    Easing.IN_OUT_CUBIC: ease_in_out_cubic,
    Easing.IN_QUART: ease_in_quart,
    Easing.OUT_QUART: ease_out_quart,
    Easing.IN_OUT_QUART: ease_in_out_quart,
    Easing.IN_QUINT: ease_in_quint,
    Easing.OUT_QUINT: ease_out_quint,
    Easing.IN_OUT_QUINT: ease_in_out_quint,
    Easing.IN_SINE: ease_in_sine,
    Easing.OUT_SINE: ease_out_sine,
    Easing.IN_OUT_SINE: ease_in_out_sine,
    Easing.IN_EXPO: ease_in_expo,
    Easing.OUT_EXPO: ease_out_expo,
    Easing.IN_OUT_EXPO: ease_in_out_expo,
    Easing.IN_CIRC: ease_in_circ,
    Easing.OUT_CIRC: ease_out_circ,
    Easing.IN_OUT_CIRC: ease_in_out_circ,
    Easing.IN_BACK: ease_in_back,
    Easing.OUT_BACK: ease_out_back,
    Easing.IN_OUT_BACK: ease_in_out_back,
    Easing.IN_ELASTIC: ease_in_elastic,
    Easing.OUT_ELASTIC: ease_out_elastic,
    Easing.IN_OUT_ELASTIC: ease_in_out_elastic,
    Easing.IN_BOUNCE: ease_in_bounce,
    Easing.OUT_BOUNCE: ease_out_bounce,
    Easing.IN_OUT_BOUNCE: ease_in_out_bounce,
}


def get_easing(easing: Union[Easing, str, EasingFunc]) -> EasingFunc:
    """Resolve an Easing member, its name ("out_quad") or a callable.

    Raises:
        ValueError: For an unknown curve name.
    """
    if isinstance(easing, Easing):
        return easing.func
    if isinstance(easing, str):
        try:
            return Easing(easing.lower()).func
        except ValueError:
            raise ValueError(f"unknown easing curve: {easing!r}") from None
    if callable(easing):
        return easing
    raise TypeError(f"expected Easing, str or callable, got {type(easing).__name__}")
