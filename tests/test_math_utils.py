import pytest

from alexandria.math_utils import (
    clamp,
    collapse_index,
    collapse_index_3d,
    get_digit_at_index,
    get_number_length,
    trunc_div,
    trunc_mod,
)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0


@pytest.mark.parametrize("a,b,q,r", [(7, 2, 3, 1), (-7, 2, -3, -1), (7, -2, -3, 1), (-7, -2, 3, -1)])
def test_truncating_division(a, b, q, r):
    assert trunc_div(a, b) == q
    assert trunc_mod(a, b) == r


@pytest.mark.parametrize("index,digit", [(0, 5), (1, 4), (2, 3), (3, 2), (4, 1), (5, 0)])
def test_digit_at_index_base10(index, digit):
    assert get_digit_at_index(12345, index) == digit


def test_digit_at_index_other_bases():
    assert get_digit_at_index(0b1011, 2, base=2) == 0
    assert get_digit_at_index(0xAF, 1, base=16) == 0xA


def test_digit_of_negative_number_is_negative():
    assert get_digit_at_index(-123, 0) == -3
    assert get_digit_at_index(-123, 2) == -1


def test_number_length():
    assert get_number_length(0) == 0
    assert get_number_length(7) == 1
    assert get_number_length(12345) == 5
    assert get_number_length(-999) == 3
    assert get_number_length(255, base=16) == 2


def test_bad_base_rejected():
    with pytest.raises(ValueError):
        get_number_length(10, base=1)
    with pytest.raises(ValueError):
        get_digit_at_index(10, 0, base=0)


def test_collapse_index():
    assert collapse_index(3, 2, width=10) == 23
    assert collapse_index_3d(1, 2, 3, width=4, height=5) == 1 * 4 * 5 + 2 * 4 + 3
