"""A growable vector with rank-based editing, searching and sorting."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

DEFAULT_CAPACITY = 3


class Vector:
    """A sequence addressed by rank, doubling its capacity when it fills up."""

    def __init__(self, values: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        self._elem: list[Any] = list(values)
        if self._elem:
            self._capacity = max(capacity, 2 * len(self._elem))
        else:
            self._capacity = capacity

    @property
    def capacity(self) -> int:
        """The number of elements the vector can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._elem)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elem)

    def __getitem__(self, r: int) -> Any:
        return self._elem[r]

    def __setitem__(self, r: int, value: Any) -> None:
        self._elem[r] = value

    def __repr__(self) -> str:
        return f"Vector({self._elem!r})"

    def _expand(self) -> None:
        if len(self._elem) < self._capacity:
            return
        self._capacity = max(self._capacity, DEFAULT_CAPACITY) * 2

    def _check_range(self, lo: int, hi: int) -> None:
        if not 0 <= lo <= hi <= len(self._elem):
            raise IndexError("rank range out of bounds")

    def traverse(self, visit: Callable[[Any], Any]) -> None:
        """Call visit on every element; a value it returns other than None replaces the element."""
        for r, e in enumerate(self._elem):
            result = visit(e)
            if result is not None:
                self._elem[r] = result

    def insert(self, e: Any, r: int | None = None) -> int:
        """Insert e so that it gets rank r (default: at the end) and return r."""
        if r is None:
            r = len(self._elem)
        if not 0 <= r <= len(self._elem):
            raise IndexError("insert rank out of range")
        self._expand()
        self._elem.insert(r, e)
        return r

    def remove_range(self, lo: int, hi: int) -> int:
        """Remove the elements with ranks in [lo, hi) and return how many went."""
        self._check_range(lo, hi)
        del self._elem[lo:hi]
        return hi - lo

    def remove(self, r: int) -> Any:
        """Remove the element of rank r and return it."""
        if not 0 <= r < len(self._elem):
            raise IndexError("remove rank out of range")
        e = self._elem[r]
        self.remove_range(r, r + 1)
        return e

    def find(self, e: Any, lo: int = 0, hi: int | None = None) -> int:
        """Return the largest rank in [lo, hi) holding e, or lo - 1 if there is none."""
        if hi is None:
            hi = len(self._elem)
        self._check_range(lo, hi)
        for r in range(hi - 1, lo - 1, -1):
            if self._elem[r] == e:
                return r
        return lo - 1

    def deduplicate(self) -> int:
        """Drop later repeats of every element and return how many were removed."""
        old_size = len(self._elem)
        i = 1
        while i < len(self._elem):
            if self.find(self._elem[i], 0, i) < 0:
                i += 1
            else:
                self.remove(i)
        return old_size - len(self._elem)

    def disordered(self) -> int:
        """Count the adjacent pairs that are out of ascending order."""
        return sum(a > b for a, b in zip(self._elem, self._elem[1:]))

    def uniquify(self) -> int:
        """Drop repeats from a sorted vector and return how many were removed."""
        if not self._elem:
            return 0
        i = 0
        for j in range(1, len(self._elem)):
            if self._elem[i] != self._elem[j]:
                i += 1
                self._elem[i] = self._elem[j]
        removed = len(self._elem) - (i + 1)
        del self._elem[i + 1 :]
        return removed

    def search(self, e: Any, lo: int = 0, hi: int | None = None) -> int:
        """Binary-search a sorted range [lo, hi) for the largest rank whose element is not above e.

        Returns lo - 1 when every element in the range is greater than e.
        """
        if hi is None:
            hi = len(self._elem)
        self._check_range(lo, hi)
        while lo < hi:
            mi = (lo + hi) >> 1
            if e < self._elem[mi]:
                hi = mi
            else:
                lo = mi + 1
        return lo - 1

    def _bubble(self, lo: int, hi: int) -> int:
        last = lo
        for i in range(lo + 1, hi):
            if self._elem[i - 1] > self._elem[i]:
                last = i
                self._elem[i - 1], self._elem[i] = self._elem[i], self._elem[i - 1]
        return last

    def bubble_sort(self, lo: int = 0, hi: int | None = None) -> None:
        """Sort the range [lo, hi) in ascending order by bubbling."""
        if hi is None:
            hi = len(self._elem)
        self._check_range(lo, hi)
        while lo < (hi := self._bubble(lo, hi)):
            pass