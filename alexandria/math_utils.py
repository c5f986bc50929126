"""Pure math utilities - no external dependencies."""

from __future__ import annotations


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (C semantics)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching trunc_div (sign follows the dividend)."""
    return a - b * trunc_div(a, b)


def get_digit_at_index(source: int, index: int, base: int = 10) -> int:
    """Digit of source at position index, counting from the right (0 = ones).

    Negative sources yield negative digits, as with C integer arithmetic.
    """
    if base < 2:
        raise ValueError(f"base must be >= 2, got {base}")
    for _ in range(index):
        source = trunc_div(source, base)
    return trunc_mod(source, base)


def get_number_length(source: int, base: int = 10) -> int:
    """Number of base-`base` digits in source (0 has length 0)."""
    if base < 2:
        raise ValueError(f"base must be >= 2, got {base}")
    digits = 0
    while source:
        source = trunc_div(source, base)
        digits += 1
    return digits


def collapse_index(x: int, y: int, width: int) -> int:
    """Collapse a 2D (x, y) index into a row-major 1D index."""
    return y * width + x


def collapse_index_3d(x: int, y: int, z: int, width: int, height: int) -> int:
    """Collapse a 3D index into a 1D index (x outermost, z innermost)."""
    return x * width * height + y * width + z
