"""alexandria - a collection of small, independent Python utilities.

Containers (CircularBuffer, PyVector), vector and colour maths, bitmap
writing, base64 and string extraction, POD serialization, easing curves
and tweens, terminal colours, debug printing and a tiny test session.
"""

from .containers import CircularBuffer, PyVector
from .types import Color, ColorAlpha, ColorHSV
from .vector import Vector3
from .easing import Easing, get_easing
from .animation import Tween, Rect
from .random_utils import FastBoolGenerator
from .testing import TestSession

__version__ = "0.1.0"

__all__ = [
    'CircularBuffer',
    'PyVector',
    'Color',
    'ColorAlpha',
    'ColorHSV',
    'Vector3',
    'Easing',
    'get_easing',
    'Tween',
    'Rect',
    'FastBoolGenerator',
    'TestSession',
]
