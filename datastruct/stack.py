"""A LIFO stack and two of its classic uses: bracket matching and base conversion."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

_DIGITS = "0123456789ABCDEF"


class Stack:
    """A last-in first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, val: Any) -> None:
        """Put val on top of the stack."""
        self._items.append(val)

    def pop(self) -> Any:
        """Remove and return the top element; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)


def paren(exp: Sequence[str], lo: int = 0, hi: int | None = None) -> bool:
    """Check that the parentheses in ``exp[lo:hi]`` match.

    Every '(' opens a pair and every other character closes one.
    """
    if hi is None:
        hi = len(exp)
    s = Stack()
    for ch in exp[lo:hi]:
        if ch == "(":
            s.push(ch)
        elif not s.is_empty():
            s.pop()
        else:
            return False
    return s.is_empty()


def convert(n: int, base: int) -> str:
    """Write positive n in the given base (2 to 16); zero or less gives ''."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError("base must be between 2 and 16")
    s = Stack()
    while n > 0:
        s.push(n % base)
        n //= base
    return "".join(_DIGITS[d] for d in s)