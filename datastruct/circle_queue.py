"""A ring-buffer queue that keeps one slot free to tell full from empty."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_SLOTS = 6


class CircleQueue:
    """A FIFO queue of ints over ``slots`` cells, holding at most ``slots - 1``."""

    def __init__(self, slots: int = DEFAULT_SLOTS) -> None:
        if slots < 2:
            raise ValueError("a circular queue needs at least two slots")
        self._base: list[int | None] = [None] * slots
        self._front = 0
        self._rear = 0

    @property
    def slots(self) -> int:
        return len(self._base)

    def is_full(self) -> bool:
        """Return True if no further element can be enqueued."""
        return (self._rear + 1) % self.slots == self._front

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._front == self._rear

    def enqueue(self, val: int) -> None:
        """Append val at the rear; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._base[self._rear] = val
        self._rear = (self._rear + 1) % self.slots

    def dequeue(self) -> int:
        """Remove and return the front element; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        val = self._base[self._front]
        self._base[self._front] = None
        self._front = (self._front + 1) % self.slots
        return val  # type: ignore[return-value]

    def __iter__(self) -> Iterator[int]:
        i = self._front
        while i != self._rear:
            yield self._base[i]  # type: ignore[misc]
            i = (i + 1) % self.slots

    def __len__(self) -> int:
        return (self._rear - self._front) % self.slots