"""Slicing vector adapter - negative indexing and call-style range slicing."""

from __future__ import annotations
import copy
import operator
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class PyVector(Generic[T]):
    """Dynamic array with Python-style negative indexing.

    ``vec[-1]`` is the last element. ``vec(start, end)`` copies the
    end-exclusive range ``[start, end)`` into a new PyVector; unlike bracket
    indexing it does not accept negative bounds.

    Bracket indexing remaps a negative index once (``index + size()``);
    anything still out of range raises ``IndexError`` instead of wrapping again.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self.data: List[T] = list(items) if items is not None else []

    @classmethod
    def sized(cls, count: int, fill: Optional[T] = None) -> PyVector[T]:
        """Create a vector pre-filled with count shallow copies of fill."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return cls(copy.copy(fill) for _ in range(count))

    def _remap(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += len(self.data)
            if index < 0:
                raise IndexError("PyVector index out of range")
        return index

    def __getitem__(self, index: int) -> T:
        return self.data[self._remap(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self.data[self._remap(index)] = value

    def __call__(self, start: int, end: int) -> PyVector[T]:
        """Copy of elements in [start, end)."""
        start = operator.index(start)
        end = operator.index(end)
        if start < 0 or end < 0:
            raise IndexError(f"slice bounds must be non-negative, got ({start}, {end})")
        if start > end or end > len(self.data):
            raise IndexError(
                f"slice ({start}, {end}) out of range for PyVector of size {len(self.data)}"
            )
        return type(self)(self.data[start:end])

    # Passthrough container operations

    def push_back(self, value: T) -> None:
        self.data.append(value)

    append = push_back

    def pop_back(self) -> T:
        if not self.data:
            raise IndexError("pop_back from an empty PyVector")
        return self.data.pop()

    def clear(self) -> None:
        self.data.clear()

    def resize(self, count: int, fill: Optional[T] = None) -> None:
        """Grow with shallow copies of fill or truncate to exactly count elements."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        current = len(self.data)
        if count < current:
            del self.data[count:]
        else:
            self.data.extend(copy.copy(fill) for _ in range(count - current))

    def reserve(self, capacity: int) -> None:
        """Capacity hint; Python lists manage their own growth."""
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")

    def size(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, PyVector):
            return self.data == other.data
        if isinstance(other, list):
            return self.data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"PyVector({self.data!r})"
