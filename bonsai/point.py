"""
Integer grid helpers for the bonsai growth engine.

Terminal cells are addressed by integer (x, y) coordinates with the
origin in the top-left corner, so "up" is a negative y delta.
"""

import math
from typing import NamedTuple


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounding away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_to_tenth(value: float) -> float:
    """Round to one decimal place, with halves rounding away from zero."""
    return round_half_away(value * 10.0) / 10.0


class Point(NamedTuple):
    """An immutable integer 2D coordinate or delta."""

    x: int
    y: int

    def __add__(self, other: tuple[int, int]) -> "Point":  # type: ignore[override]
        return Point(self.x + other[0], self.y + other[1])

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Bounds(NamedTuple):
    """
    Playable area of the screen.

    Positions are kept in [margin, dimension - 1] on both axes. The margin
    leaves room for the terminal's input line.
    """

    margin: int
    width: int
    height: int

    def clamp(self, point: Point) -> Point:
        x = min(max(point.x, self.margin), self.width - 1)
        y = min(max(point.y, self.margin), self.height - 1)
        return Point(x, y)

    def contains(self, point: Point) -> bool:
        return (
            self.margin <= point.x <= self.width - 1
            and self.margin <= point.y <= self.height - 1
        )

    def height_ratio(self, y: int) -> float:
        """How far up the screen a row is, 0 at the bottom and 1 at the top."""
        return min(max(1.0 - y / (self.height - 1), 0.0), 1.0)
