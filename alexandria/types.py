"""Core colour records for alexandria."""

from __future__ import annotations
import struct
from dataclasses import dataclass
from typing import Tuple

_RGBA_BYTES = struct.Struct("<4B")
_FLOAT32 = struct.Struct("<f")


@dataclass
class Color:
    """A small 8-bit-per-channel RGB color."""
    r: int = 0
    g: int = 0
    b: int = 0

    def __str__(self) -> str:
        return f"({self.r}, {self.g}, {self.b})"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass
class ColorAlpha:
    """A small 8-bit-per-channel RGBA color."""
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __str__(self) -> str:
        return f"({self.r}, {self.g}, {self.b}, {self.a})"

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_float(self) -> float:
        """Reinterpret the four channel bytes as a float32 (for transport).

        Channels are truncated to their low byte, as when writing bitmaps.
        """
        channels = (self.r & 0xFF, self.g & 0xFF, self.b & 0xFF, self.a & 0xFF)
        return _FLOAT32.unpack(_RGBA_BYTES.pack(*channels))[0]

    @classmethod
    def from_float(cls, value: float) -> ColorAlpha:
        """Inverse of to_float()."""
        return cls(*_RGBA_BYTES.unpack(_FLOAT32.pack(value)))


@dataclass
class ColorHSV:
    """A small 8-bit-per-channel HSV color (hue wraps at 256)."""
    h: int = 0
    s: int = 0
    v: int = 0

    def __str__(self) -> str:
        return f"({self.h}, {self.s}, {self.v})"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.h, self.s, self.v)
