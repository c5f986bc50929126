"""Circular buffer adapter - a list with a movable logical zero."""

from __future__ import annotations
import operator
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """Sequence whose start can be rotated without moving the elements.

    Logical position ``i`` (any integer, negative included) addresses the
    physical slot ``(zero_index + i) % size()``. ``insert`` and ``remove``
    work at logical position 0.

    Example:
        >>> circle = CircularBuffer()
        >>> for word in ("One", "Two", "Three"):
        ...     circle.insert(word)
        >>> circle.to_list()
        ['Three', 'Two', 'One']
        >>> circle.post_increment()
        'Three'
        >>> circle.to_list()
        ['Two', 'One', 'Three']
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._storage: List[T] = list(items) if items is not None else []
        self._zero_index: int = 0

    @property
    def zero_index(self) -> int:
        """Physical index currently treated as logical position 0."""
        return self._zero_index

    def size(self) -> int:
        """Current element count."""
        return len(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def is_empty(self) -> bool:
        return not self._storage

    def clear(self) -> None:
        """Remove all elements and reset the logical zero."""
        self._storage.clear()
        self._zero_index = 0

    def insert(self, element: T) -> None:
        """Insert before logical 0; the new element becomes logical 0.

        O(n) because the backing list shifts.
        """
        self._storage.insert(self._zero_index, element)

    def remove(self) -> T:
        """Remove and return the element at logical 0.

        The former logical 1 becomes logical 0.

        Raises:
            IndexError: If the buffer is empty.
        """
        self._require_elements("remove from")
        element = self._storage.pop(self._zero_index)
        if self._zero_index >= len(self._storage):
            self._zero_index = 0
        return element

    # ═══════════════════════════════════════════════════════════════════════
    # Rotation
    # ═══════════════════════════════════════════════════════════════════════

    def advance(self, delta: int = 1) -> CircularBuffer[T]:
        """Move logical zero forward by delta positions (wrapping)."""
        self._require_elements("rotate")
        self._zero_index = (self._zero_index + operator.index(delta)) % len(self._storage)
        return self

    def retreat(self, delta: int = 1) -> CircularBuffer[T]:
        """Move logical zero backward by delta positions (wrapping)."""
        return self.advance(-operator.index(delta))

    def __iadd__(self, delta: int) -> CircularBuffer[T]:
        return self.advance(delta)

    def __isub__(self, delta: int) -> CircularBuffer[T]:
        return self.retreat(delta)

    def increment(self) -> CircularBuffer[T]:
        """Prefix increment: rotate forward by one and return self."""
        return self.advance(1)

    def decrement(self) -> CircularBuffer[T]:
        """Prefix decrement: rotate backward by one and return self."""
        return self.retreat(1)

    def post_increment(self) -> T:
        """Postfix increment: return the old logical 0, then rotate forward."""
        self._require_elements("rotate")
        previous = self._storage[self._zero_index]
        self.advance(1)
        return previous

    def post_decrement(self) -> T:
        """Postfix decrement: return the old logical 0, then rotate backward."""
        self._require_elements("rotate")
        previous = self._storage[self._zero_index]
        self.retreat(1)
        return previous

    # ═══════════════════════════════════════════════════════════════════════
    # Element access
    # ═══════════════════════════════════════════════════════════════════════

    def _physical(self, offset: int) -> int:
        self._require_elements("index")
        return (self._zero_index + operator.index(offset)) % len(self._storage)

    def __getitem__(self, offset: int) -> T:
        return self._storage[self._physical(offset)]

    def __setitem__(self, offset: int, value: T) -> None:
        self._storage[self._physical(offset)] = value

    def __iter__(self) -> Iterator[T]:
        """Yield one full cycle starting at logical 0."""
        return self.cycle(len(self._storage))

    def cycle(self, count: int) -> Iterator[T]:
        """Yield count consecutive logical elements, wrapping as needed."""
        if count <= 0:
            return
        for i in range(count):
            yield self[i]

    def to_list(self) -> List[T]:
        """Snapshot of the logical view, logical 0 first."""
        return list(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"CircularBuffer({self.to_list()!r}, zero_index={self._zero_index})"

    def _require_elements(self, action: str) -> None:
        if not self._storage:
            raise IndexError(f"cannot {action} an empty CircularBuffer")
