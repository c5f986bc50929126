"""Debug printing helpers: name, identity, type and value of a variable."""

from __future__ import annotations
import inspect
import os
import sys
import time
from typing import Any, Optional, TextIO

_LOADED_AT = time.localtime()


def _type_name(value: Any) -> str:
    t = type(value)
    if t.__module__ == "builtins":
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


def debug_string(name: str, value: Any) -> str:
    """``name @ 0x... (type) = value``."""
    return f"{name} @ {id(value):#x} ({_type_name(value)}) = {value!r}"


def debug_novalue_string(name: str, value: Any) -> str:
    """Like debug_string() without the value (for objects with a costly repr)."""
    return f"{name} @ {id(value):#x} ({_type_name(value)})"


def debug_basic_string(name: str, value: Any) -> str:
    """Name and type only."""
    return f"{name} ({_type_name(value)})"


def debug(name: str, value: Any, out: Optional[TextIO] = None) -> None:
    print(debug_string(name, value), file=out or sys.stdout)


def debug_novalue(name: str, value: Any, out: Optional[TextIO] = None) -> None:
    print(debug_novalue_string(name, value), file=out or sys.stdout)


def debug_basic(name: str, value: Any, out: Optional[TextIO] = None) -> None:
    print(debug_basic_string(name, value), file=out or sys.stdout)


def location(depth: int = 1) -> str:
    """``"file.py:line"`` of the caller (depth frames up the stack)."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>:0"
        return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
    finally:
        del frame


def compile_time() -> str:
    """When alexandria was loaded, as ``"HH:MM:SS on Mon DD YYYY"``."""
    return time.strftime("%H:%M:%S on %b %d %Y", _LOADED_AT)
