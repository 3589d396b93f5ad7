"""An array with a fixed capacity and 1-based positional insert and delete."""

from __future__ import annotations

from collections.abc import Iterator


class BoundedArray:
    """A sequence of ints that never holds more than ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedArray(capacity={self.capacity}, items={self._items!r})"

    def is_empty(self) -> bool:
        """Return True if the array holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the array holds ``capacity`` elements."""
        return len(self._items) == self.capacity

    def append(self, val: int) -> None:
        """Add val at the end; raise OverflowError when the array is full."""
        if self.is_full():
            raise OverflowError("array is full")
        self._items.append(val)

    def insert(self, pos: int, val: int) -> None:
        """Insert val so that it becomes element number pos (counting from 1)."""
        if self.is_full():
            raise OverflowError("array is full")
        if pos < 1 or pos > len(self._items) + 1:
            raise IndexError("insert position out of range")
        self._items.insert(pos - 1, val)

    def delete(self, pos: int) -> int:
        """Remove element number pos (counting from 1) and return it."""
        if self.is_empty():
            raise IndexError("delete from empty array")
        if pos < 1 or pos > len(self._items):
            raise IndexError("delete position out of range")
        return self._items.pop(pos - 1)

    def sort(self) -> None:
        """Sort the elements in ascending order."""
        self._items.sort()

    def invert(self) -> None:
        """Reverse the order of the elements."""
        self._items.reverse()