"""Character and string utilities: suffix test, integer scanning, line reading, matching."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator

MAX_LINES = 5000

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset(string.digits)
_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def strend(s: str, t: str) -> bool:
    """Return True if t occurs at the end of s."""
    return s.endswith(t)


def get_ints(text: str) -> Iterator[int]:
    """Yield the signed decimal integers at the front of text.

    Scanning skips white space, stops at the first token that is not a number,
    and at a sign not followed by a digit. A number is only reported once a
    character after it confirms its end, so one that runs into the end of the
    text is not yielded.
    """
    pos = 0
    n = len(text)
    while True:
        while pos < n and text[pos] in _SPACE:
            pos += 1
        if pos >= n:
            return
        c = text[pos]
        if c not in _DIGITS and c not in "+-":
            return
        sign = -1 if c == "-" else 1
        if c in "+-":
            pos += 1
            if pos >= n or text[pos] not in _DIGITS:
                return
        start = pos
        while pos < n and text[pos] in _DIGITS:
            pos += 1
        if pos >= n:
            return
        yield sign * int(text[start:pos])


def read_lines(stream: Iterable[str], max_lines: int = MAX_LINES) -> list[str]:
    """Read lines from stream without their newlines.

    Raises ValueError when the input holds more than max_lines lines.
    """
    lines: list[str] = []
    for line in stream:
        if len(lines) >= max_lines:
            raise ValueError("input too big to sort")
        lines.append(line[:-1] if line.endswith("\n") else line)
    return lines


def to_lower(text: str) -> str:
    """Lower-case the ASCII capitals in text, leaving every other character alone."""
    return text.translate(_LOWER_TABLE)


def match(pattern: str, text: str) -> int:
    """Find pattern in text by brute force.

    Returns the index of the first occurrence; a result greater than
    ``len(text) - len(pattern)`` means the pattern does not occur.
    """
    n, m = len(text), len(pattern)
    i = j = 0
    while j < m and i < n:
        if text[i] == pattern[j]:
            i += 1
            j += 1
        else:
            i -= j - 1
            j = 0
    return i - j