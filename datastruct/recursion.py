"""Small recursive and iterative algorithms: Fibonacci, Hanoi, factorial, sums."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by double recursion, with f(0)=0 and f(1)=1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_iterative(n: int) -> int:
    """Run the two-variable Fibonacci loop n times and return the leading value.

    The loop starts from (f, g) = (0, 1), so the result for n is fibonacci(n + 1).
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    f, g = 0, 1
    for _ in range(n):
        g = g + f
        f = g - f
    return g


def hanoi(
    n: int, source: str = "A", via: str = "B", target: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` that carry n disks from source to target."""
    if n < 1:
        raise ValueError("at least one disk is required")
    return _hanoi_moves(n, source, via, target)


def _hanoi_moves(n: int, a: str, b: str, c: str) -> Iterator[tuple[int, str, str]]:
    if n == 1:
        yield (n, a, c)
        return
    yield from _hanoi_moves(n - 1, a, c, b)
    yield (n, a, c)
    yield from _hanoi_moves(n - 1, b, a, c)


def factorial(n: int) -> int:
    """Return n! for n >= 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def triangular(n: int) -> int:
    """Return 1 + 2 + ... + n for n >= 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return sum(range(1, n + 1))


def reverse(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Reverse ``items[lo..hi]`` (both ends inclusive) in place."""
    if lo < hi:
        items[lo : hi + 1] = items[lo : hi + 1][::-1]


def range_sum(items: Sequence[Any], lo: int, hi: int) -> Any:
    """Sum ``items[lo..hi]`` (inclusive) by splitting the range in halves."""
    if lo > hi:
        raise ValueError("lo must not exceed hi")
    if lo == hi:
        return items[lo]
    mi = (lo + hi) >> 1
    return range_sum(items, lo, mi) + range_sum(items, mi + 1, hi)