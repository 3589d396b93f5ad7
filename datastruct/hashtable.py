"""An open-addressing hash table with linear probing and lazy deletion."""

from __future__ import annotations

from typing import Any

from datastruct.bitmap import Bitmap

PRIME_LIMIT = 1048576
DEFAULT_CAPACITY = 5

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value > _INT_MAX else value


def hash_code(key: Any) -> int:
    """Return the unsigned hash code of an int or a string.

    Ints in the 32-bit range hash to themselves; wider ints fold their high
    word onto their low word; strings use a cyclic 5-bit-shift hash.
    """
    if isinstance(key, bool):
        key = int(key)
    if isinstance(key, int):
        if _INT_MIN <= key <= _INT_MAX:
            return key & _MASK64
        return ((key >> 32) + _to_int32(key)) & _MASK64
    if isinstance(key, (bytes, bytearray)):
        key = key.decode("latin-1")
    if isinstance(key, str):
        h = 0
        for ch in key:
            h = ((h << 5) | (h >> 27)) & _MASK32
            h = (h + ord(ch)) & _MASK32
        return h
    raise TypeError(f"cannot hash key of type {type(key).__name__}")


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    d = 3
    while d * d <= n:
        if n % d == 0:
            return False
        d += 2
    return True


def _prime_not_less(c: int, limit: int = PRIME_LIMIT) -> int:
    """Return the smallest prime in [c, limit), or limit if there is none."""
    c = max(c, 0)
    while c < limit:
        if _is_prime(c):
            return c
        c += 1
    return c


class Hashtable:
    """A dictionary of unique keys kept in a prime-sized bucket array."""

    def __init__(self, c: int = DEFAULT_CAPACITY) -> None:
        self._m = _prime_not_less(c)
        self._ht: list[tuple[Any, Any] | None] = [None] * self._m
        self._n = 0
        self._removed = Bitmap(self._m)
        self._lazy = 0

    @property
    def capacity(self) -> int:
        """The number of buckets."""
        return self._m

    def __len__(self) -> int:
        return self._n

    def __contains__(self, k: Any) -> bool:
        return self._ht[self._probe_for_hit(k)] is not None

    def _probe_for_hit(self, k: Any) -> int:
        r = hash_code(k) % self._m
        while True:
            entry = self._ht[r]
            if entry is not None:
                if entry[0] == k:
                    return r
            elif not self._removed.test(r):
                return r
            r = (r + 1) % self._m

    def _probe_for_free(self, k: Any) -> int:
        r = hash_code(k) % self._m
        while self._ht[r] is not None:
            r = (r + 1) % self._m
        return r

    def _rehash(self) -> None:
        old = self._ht
        self._m = _prime_not_less(4 * self._n)
        self._ht = [None] * self._m
        self._n = 0
        self._removed = Bitmap(self._m)
        self._lazy = 0
        for entry in old:
            if entry is not None:
                self.put(*entry)

    def put(self, k: Any, v: Any) -> bool:
        """Insert the entry (k, v); return False if k is already present."""
        if self._ht[self._probe_for_hit(k)] is not None:
            return False
        r = self._probe_for_free(k)
        self._ht[r] = (k, v)
        self._n += 1
        if self._removed.test(r):
            self._removed.clear(r)
            self._lazy -= 1
        if (self._n + self._lazy) * 2 > self._m:
            self._rehash()
        return True

    def get(self, k: Any) -> Any:
        """Return the value stored under k, or None if k is absent."""
        entry = self._ht[self._probe_for_hit(k)]
        return entry[1] if entry is not None else None

    def remove(self, k: Any) -> bool:
        """Delete the entry with key k; return False if there is none."""
        r = self._probe_for_hit(k)
        if self._ht[r] is None:
            return False
        self._ht[r] = None
        self._removed.set(r)
        self._n -= 1
        self._lazy += 1
        if 3 * self._n < self._lazy:
            self._rehash()
        return True