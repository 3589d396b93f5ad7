"""Bitmaps: a packed, growable bit array and a set/clear/test bitmap with O(1) reset."""

from __future__ import annotations

import os


def _check_rank(k: int) -> None:
    if k < 0:
        raise IndexError("bit index must be non-negative")


class Bitmap:
    """A packed bit array, most significant bit first in each byte, that grows on demand."""

    def __init__(self, n: int = 8) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._init(n)

    def _init(self, n: int) -> None:
        self._bytes = bytearray((n + 7) // 8)

    @classmethod
    def load(cls, path: str | os.PathLike[str], n: int = 8) -> Bitmap:
        """Create a bitmap of n bits whose contents are read from the file at path."""
        bitmap = cls(n)
        with open(path, "rb") as fh:
            data = fh.read(len(bitmap._bytes))
        bitmap._bytes[: len(data)] = data
        return bitmap

    @property
    def capacity(self) -> int:
        """The number of bits held without growing."""
        return 8 * len(self._bytes)

    def expand(self, k: int) -> None:
        """Grow the bitmap, keeping its contents, so that bit k is inside it."""
        if k < self.capacity:
            return
        old = self._bytes
        self._init(max(2 * k, k + 1))
        self._bytes[: len(old)] = old

    def set(self, k: int) -> None:
        """Set bit k."""
        _check_rank(k)
        self.expand(k)
        self._bytes[k >> 3] |= 0x80 >> (k & 0x07)

    def clear(self, k: int) -> None:
        """Clear bit k."""
        _check_rank(k)
        self.expand(k)
        self._bytes[k >> 3] &= ~(0x80 >> (k & 0x07)) & 0xFF

    def test(self, k: int) -> bool:
        """Return whether bit k is set."""
        _check_rank(k)
        self.expand(k)
        return bool(self._bytes[k >> 3] & (0x80 >> (k & 0x07)))

    def dump(self, path: str | os.PathLike[str]) -> None:
        """Write the whole bitmap to the file at path."""
        with open(path, "wb") as fh:
            fh.write(bytes(self._bytes))

    def to_string(self, n: int) -> str:
        """Return the first n bits as a string of '0' and '1'."""
        self.expand(n - 1)
        return "".join("1" if self.test(i) else "0" for i in range(n))


class FastBitmap:
    """A bitmap of n bits that can be reset in constant time.

    Each set bit k is recorded on a stack; ``_rank[k]`` points to its slot and the
    slot points back to k. A bit counts as set only while that loop is intact
    and the slot lies below the stack top.
    """

    def __init__(self, n: int = 8) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._rank = [0] * n
        self._stack = [0] * n
        self._top = 0

    def _check(self, k: int) -> None:
        if not 0 <= k < self._n:
            raise IndexError("bit index out of range")

    def reset(self) -> None:
        """Clear every bit at once."""
        self._top = 0

    def test(self, k: int) -> bool:
        """Return whether bit k is set."""
        self._check(k)
        f = self._rank[k]
        return 0 <= f < self._top and self._stack[f] == k

    def set(self, k: int) -> None:
        """Set bit k."""
        if not self.test(k):
            self._stack[self._top] = k
            self._rank[k] = self._top
            self._top += 1

    def clear(self, k: int) -> None:
        """Clear bit k."""
        if self.test(k):
            self._top -= 1
            if self._top:
                moved = self._stack[self._top]
                self._rank[moved] = self._rank[k]
                self._stack[self._rank[k]] = moved