import math

import pytest

from alexandria import easing
from alexandria.easing import Easing, get_easing

OVERSHOOTING = {Easing.IN_BACK, Easing.OUT_BACK, Easing.IN_OUT_BACK,
                Easing.IN_ELASTIC, Easing.OUT_ELASTIC, Easing.IN_OUT_ELASTIC}


@pytest.mark.parametrize("curve", list(Easing))
def test_every_curve_starts_at_zero_and_ends_at_one(curve):
    assert math.isclose(curve(0.0), 0.0, abs_tol=1e-9)
    assert math.isclose(curve(1.0), 1.0, abs_tol=1e-9)


@pytest.mark.parametrize("curve", list(Easing))
def test_member_maps_to_same_named_function(curve):
    assert curve.func is getattr(easing, f"ease_{curve.value}")


@pytest.mark.parametrize("curve", [c for c in Easing if c not in OVERSHOOTING])
def test_non_overshooting_curves_stay_in_unit_range(curve):
    for i in range(101):
        assert -1e-9 <= curve(i / 100.0) <= 1.0 + 1e-9


@pytest.mark.parametrize("curve", [c for c in Easing if c.name.startswith("IN_OUT")])
def test_in_out_curves_pass_through_half(curve):
    assert math.isclose(curve(0.5), 0.5, abs_tol=1e-9)


def test_known_values():
    assert easing.ease_in_quad(0.5) == 0.25
    assert easing.ease_out_quad(0.5) == 0.75
    assert easing.ease_in_cubic(0.5) == 0.125
    assert math.isclose(easing.ease_out_sine(0.5), math.sqrt(0.5))
    assert math.isclose(easing.ease_in_expo(0.5), 2.0 ** -5)
    assert math.isclose(easing.ease_out_bounce(0.5), 0.765625)


def test_back_curves_overshoot():
    assert easing.ease_in_back(0.2) < 0.0
    assert easing.ease_out_back(0.8) > 1.0


def test_in_is_mirror_of_out():
    for t in (0.1, 0.3, 0.7):
        assert math.isclose(easing.ease_in_bounce(t), 1.0 - easing.ease_out_bounce(1.0 - t))


def test_get_easing_resolves_all_forms():
    assert get_easing(Easing.OUT_QUAD) is easing.ease_out_quad
    assert get_easing("in_out_cubic") is easing.ease_in_out_cubic
    assert get_easing("OUT_BOUNCE") is easing.ease_out_bounce

    def custom(t):
        return t

    assert get_easing(custom) is custom


def test_get_easing_rejects_unknown():
    with pytest.raises(ValueError):
        get_easing("wobble")
    with pytest.raises(TypeError):
        get_easing(42)
