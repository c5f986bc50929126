"""Container adapters."""

from .circular import CircularBuffer
from .pyvector import PyVector

__all__ = [
    'CircularBuffer',
    'PyVector',
]
