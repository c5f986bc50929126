"""Raylib compatibility layer - converts alexandria records into raylib structs.

Works with either raylibpy or python-raylib (the ``raylib`` extra).
"""

from __future__ import annotations
import ctypes
from typing import Any, Union

# Try to import raylib
try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except Exception:
    import raylib as rl
    RL_VERSION = "python-raylib"

from .types import Color, ColorAlpha
from .vector import Vector3


class _CTypesRect(ctypes.Structure):
    """Fallback Rectangle structure for ctypes."""
    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
        ("width", ctypes.c_float),
        ("height", ctypes.c_float),
    ]


class _CTypesVec3(ctypes.Structure):
    """Fallback Vector3 structure for ctypes."""
    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
        ("z", ctypes.c_float),
    ]


class _CTypesColor(ctypes.Structure):
    """Fallback Color structure for ctypes."""
    _fields_ = [
        ("r", ctypes.c_ubyte),
        ("g", ctypes.c_ubyte),
        ("b", ctypes.c_ubyte),
        ("a", ctypes.c_ubyte),
    ]


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    """Create a raylib Rectangle compatible with the current binding."""
    if hasattr(rl, 'Rectangle'):
        try:
            return rl.Rectangle(x, y, w, h)
        except Exception:
            pass
    if hasattr(rl, 'ffi'):
        r = rl.ffi.new("Rectangle *")
        r[0].x = float(x)
        r[0].y = float(y)
        r[0].width = float(w)
        r[0].height = float(h)
        return r[0]
    return _CTypesRect(float(x), float(y), float(w), float(h))


def make_vec3(v: Vector3) -> Any:
    """Create a raylib Vector3 from a Vector3."""
    if hasattr(rl, 'Vector3'):
        try:
            return rl.Vector3(v.x, v.y, v.z)
        except Exception:
            pass
    if hasattr(rl, 'ffi'):
        out = rl.ffi.new("Vector3 *")
        out[0].x = float(v.x)
        out[0].y = float(v.y)
        out[0].z = float(v.z)
        return out[0]
    return _CTypesVec3(float(v.x), float(v.y), float(v.z))


def make_color(color: Union[Color, ColorAlpha]) -> Any:
    """Create a raylib Color; plain Color is treated as opaque."""
    a = color.a if isinstance(color, ColorAlpha) else 255
    r, g, b, a = int(color.r), int(color.g), int(color.b), int(a)
    ctor = getattr(rl, "Color", None)
    if ctor:
        try:
            return ctor(r, g, b, a)
        except Exception:
            pass
    if hasattr(rl, 'ffi'):
        out = rl.ffi.new("Color *")
        out[0].r = r
        out[0].g = g
        out[0].b = b
        out[0].a = a
        return out[0]
    return _CTypesColor(r, g, b, a)


__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_vec3',
    'make_color',
]
