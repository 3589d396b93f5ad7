"""A first-in first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Queue:
    """A FIFO queue: insert at the rear, remove from the front."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, e: Any) -> None:
        """Append e at the rear."""
        self._items.append(e)

    def dequeue(self) -> Any:
        """Remove and return the front element; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front element without removing it."""
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)