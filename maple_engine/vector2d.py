"""Two-dimensional vectors and a convex polygon hit test."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class Vector2D:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def vector_from(self, start: Vector2D) -> Vector2D:
        """Vector pointing from ``start`` to this point."""
        return vector_between(start, self)

    def cross(self, other: Vector2D) -> float:
        return cross(self, other)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> None:
        """Scale to unit length in place; a zero vector raises ZeroDivisionError."""
        length = self.length()
        self.x /= length
        self.y /= length

    def is_inside(self, points: Optional[Sequence[Vector2D]]) -> bool:
        """Whether this point lies inside the counter-clockwise convex polygon."""
        if not points:
            return False
        count = len(points)
        for index, start in enumerate(points):
            end = points[(index + 1) % count]
            if cross(vector_between(start, end), self.vector_from(start)) < 0:
                return False
        return True

    def __pos__(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __add__(self, other: Vector2D) -> Vector2D:
        result = +self
        result += other
        return result

    def __sub__(self, other: Vector2D) -> Vector2D:
        result = +self
        result -= other
        return result

    def __mul__(self, k: float) -> Vector2D:
        result = +self
        result *= k
        return result

    def __rmul__(self, k: float) -> Vector2D:
        return self * k

    def __truediv__(self, k: float) -> Vector2D:
        result = +self
        result /= k
        return result

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2D) -> Vector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, k: float) -> Vector2D:
        self.x *= k
        self.y *= k
        return self

    def __itruediv__(self, k: float) -> Vector2D:
        self.x /= k
        self.y /= k
        return self


def vector_between(start: Vector2D, end: Vector2D) -> Vector2D:
    """Vector pointing from ``start`` to ``end``."""
    return Vector2D(end.x - start.x, end.y - start.y)


def cross(a: Vector2D, b: Vector2D) -> float:
    """The z component of the cross product of ``a`` and ``b``."""
    return a.x * b.y - a.y * b.x


def contains_point(points: Optional[Sequence[Vector2D]], point: Vector2D) -> bool:
    """Whether ``point`` lies inside the counter-clockwise convex polygon."""
    return point.is_inside(points)