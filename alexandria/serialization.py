"""Flat POD serialization for ctypes values and structures.

A POD here is any fixed-layout ctypes type: a simple type such as
``ctypes.c_int32`` or a ``ctypes.Structure`` without pointer fields.
Values are written as their raw in-memory bytes, so files are only portable
between machines with the same layout (use ``LittleEndianStructure`` for a
fixed byte order).
"""

from __future__ import annotations
import ctypes
import struct
from typing import BinaryIO, List, Sequence, Type, TypeVar

from .config import POD_COUNT_FORMAT
from .logging import log

POD = TypeVar("POD")

_COUNT = struct.Struct(POD_COUNT_FORMAT)
_READ_CHUNK = 1 << 20


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    # Chunked so a corrupt length cannot force one huge allocation up front
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(min(remaining, _READ_CHUNK))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes for {what}, got {len(data)}")
    return data


def write_pod(stream: BinaryIO, value) -> None:
    """Write the raw bytes of a ctypes value."""
    stream.write(bytes(value))


def read_pod(stream: BinaryIO, pod_type: Type[POD]) -> POD:
    """Read sizeof(pod_type) bytes back into a new pod_type instance.

    Raises:
        EOFError: If the stream ends early.
    """
    size = ctypes.sizeof(pod_type)
    return pod_type.from_buffer_copy(_read_exact(stream, size, pod_type.__name__))


def write_pod_vector(stream: BinaryIO, values: Sequence, pod_type: Type) -> None:
    """Write a count prefix followed by every element's raw bytes.

    Elements that are not already pod_type instances are converted with
    pod_type(value), so plain ints and floats work for simple types.
    """
    array = (pod_type * len(values))(*values)
    stream.write(_COUNT.pack(len(values)))
    stream.write(bytes(array))
    log(f"[POD] Wrote {len(values)} x {pod_type.__name__}")


def read_pod_vector(stream: BinaryIO, pod_type: Type[POD]) -> List[POD]:
    """Read a vector written by write_pod_vector().

    Simple ctypes types come back as plain Python values, structures as
    pod_type instances.

    Raises:
        EOFError: If the stream ends early.
        ValueError: If the stored count is negative or too large to address.
    """
    (count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size, "vector length"))
    if count < 0:
        raise ValueError(f"corrupt POD vector length {count}")
    try:
        array_type = pod_type * count
    except OverflowError:
        raise ValueError(
            f"corrupt POD vector length {count} for {pod_type.__name__}"
        ) from None
    raw = _read_exact(stream, ctypes.sizeof(array_type), f"{count} x {pod_type.__name__}")
    array = array_type.from_buffer_copy(raw)
    log(f"[POD] Read {count} x {pod_type.__name__}")
    return list(array)
