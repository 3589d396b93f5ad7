"""Prime numbers via the sieve of Eratosthenes, stored as a bitmap of composites."""

from __future__ import annotations

import os

from datastruct.bitmap import Bitmap


def sieve(n: int) -> Bitmap:
    """Return a bitmap over [0, n) in which every number that is not prime is set."""
    if n < 0:
        raise ValueError("n must be non-negative")
    b = Bitmap(n)
    b.set(0)
    b.set(1)
    i = 2
    while i * i < n:
        if not b.test(i):
            for j in range(i * i, n, i):
                b.set(j)
        i += 1
    return b


def eratosthenes(n: int, path: str | os.PathLike[str]) -> None:
    """Sieve [0, n) and write the resulting bitmap to the file at path."""
    sieve(n).dump(path)


def _first_clear(b: Bitmap, c: int, n: int) -> int:
    while c < n:
        if not b.test(c):
            return c
        c += 1
    return c


def prime_nlt(c: int, n: int, path: str | os.PathLike[str]) -> int:
    """Return the smallest prime in [c, n) using the sieve bitmap stored at path.

    Returns n (or c, if c is already past n) when there is no such prime.
    """
    return _first_clear(Bitmap.load(path, n), c, n)


def smallest_prime_not_less(c: int, n: int) -> int:
    """Return the smallest prime in [c, n), sieving in memory; n if there is none."""
    return _first_clear(sieve(n), c, n)