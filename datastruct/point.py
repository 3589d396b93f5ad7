"""Small value classes: a 2-D point, a moving player and a student record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A 2-D point whose coordinates are also reachable as p[0] and p[1]."""

    x: float
    y: float

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        raise IndexError("point index must be 0 or 1")

    def __setitem__(self, i: int, value: float) -> None:
        if i == 0:
            self.x = value
        elif i == 1:
            self.y = value
        else:
            raise IndexError("point index must be 0 or 1")

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other[0], self.y + other[1])

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g}"


@dataclass
class Player:
    """A player at (x, y) that moves speed units per step."""

    x: int = 0
    y: int = 0
    speed: int = 0

    def move(self, xa: int, ya: int) -> None:
        """Move by (xa, ya) steps."""
        self.x += xa * self.speed
        self.y += ya * self.speed


@dataclass
class Student:
    """A student's name and score."""

    name: str = "No"
    score: float = 0.0

    def __str__(self) -> str:
        return f"{self.name} , {self.score:g}"


def parse_student(text: str) -> Student:
    """Read a student from text holding a name and a score separated by white space."""
    fields = text.split()
    if len(fields) < 2:
        raise ValueError("expected a name and a score")
    return Student(fields[0], float(fields[1]))