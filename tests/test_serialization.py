import ctypes
import io

import pytest

from alexandria.serialization import read_pod, read_pod_vector, write_pod, write_pod_vector


class Point(ctypes.LittleEndianStructure):
    _fields_ = [
        ("x", ctypes.c_int32),
        ("y", ctypes.c_int32),
        ("weight", ctypes.c_float),
    ]


def test_write_pod_writes_raw_bytes():
    stream = io.BytesIO()
    write_pod(stream, ctypes.c_uint16(0x0102))
    assert stream.getvalue() == bytes(ctypes.c_uint16(0x0102))
    assert len(stream.getvalue()) == 2


def test_structure_round_trip():
    stream = io.BytesIO()
    write_pod(stream, Point(3, -4, 0.5))
    write_pod(stream, ctypes.c_double(2.25))
    stream.seek(0)

    p = read_pod(stream, Point)
    assert (p.x, p.y, p.weight) == (3, -4, 0.5)
    assert read_pod(stream, ctypes.c_double).value == 2.25


def test_read_pod_short_stream_raises():
    with pytest.raises(EOFError):
        read_pod(io.BytesIO(b"\x01\x02"), ctypes.c_int32)


def test_vector_of_simple_values():
    stream = io.BytesIO()
    write_pod_vector(stream, [1, 2, 3, -7], ctypes.c_int16)
    assert len(stream.getvalue()) == 8 + 4 * 2
    stream.seek(0)
    assert read_pod_vector(stream, ctypes.c_int16) == [1, 2, 3, -7]


def test_vector_of_structures():
    stream = io.BytesIO()
    write_pod_vector(stream, [Point(1, 2, 1.0), Point(5, 6, 0.25)], Point)
    stream.seek(0)
    points = read_pod_vector(stream, Point)
    assert [(p.x, p.y, p.weight) for p in points] == [(1, 2, 1.0), (5, 6, 0.25)]


def test_empty_vector():
    stream = io.BytesIO()
    write_pod_vector(stream, [], ctypes.c_int32)
    assert stream.getvalue() == bytes(8)
    stream.seek(0)
    assert read_pod_vector(stream, ctypes.c_int32) == []


def test_truncated_vector_raises():
    stream = io.BytesIO()
    write_pod_vector(stream, [1, 2, 3], ctypes.c_int32)
    truncated = io.BytesIO(stream.getvalue()[:-1])
    with pytest.raises(EOFError):
        read_pod_vector(truncated, ctypes.c_int32)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        read_pod_vector(io.BytesIO((-1).to_bytes(8, "little", signed=True)), ctypes.c_int32)


def test_unaddressable_count_rejected():
    stream = io.BytesIO((2**62).to_bytes(8, "little", signed=True) + bytes(8))
    with pytest.raises(ValueError):
        read_pod_vector(stream, ctypes.c_int32)


def test_large_count_with_short_body_raises_eof():
    stream = io.BytesIO((2**40).to_bytes(8, "little", signed=True) + bytes(8))
    with pytest.raises(EOFError):
        read_pod_vector(stream, ctypes.c_int32)
