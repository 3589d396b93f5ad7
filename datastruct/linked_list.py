"""A singly linked list with a head sentinel and 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    data: int | None = None
    next: _Node | None = None


class LinkedList:
    """A singly linked list of ints."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head = _Node()
        tail = self._head
        for val in values:
            tail.next = _Node(val)
            tail = tail.next

    def _nodes(self) -> Iterator[_Node]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._head.next is None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def sort(self) -> None:
        """Sort the elements in ascending order by exchanging node data."""
        for p in self._nodes():
            q = p.next
            while q is not None:
                if p.data > q.data:  # type: ignore[operator]
                    p.data, q.data = q.data, p.data
                q = q.next

    def _node_before(self, pos: int) -> _Node | None:
        if pos < 1:
            return None
        p: _Node | None = self._head
        i = 0
        while p is not None and i < pos - 1:
            p = p.next
            i += 1
        return p

    def insert(self, pos: int, val: int) -> None:
        """Insert val so that it becomes element number pos (counting from 1)."""
        p = self._node_before(pos)
        if p is None:
            raise IndexError("insert position out of range")
        p.next = _Node(val, p.next)

    def delete(self, pos: int) -> int:
        """Remove element number pos (counting from 1) and return its value."""
        p = self._node_before(pos)
        if p is None or p.next is None:
            raise IndexError("delete position out of range")
        q = p.next
        p.next = q.next
        return q.data  # type: ignore[return-value]