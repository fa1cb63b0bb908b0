"""Three-dimensional vectors and the helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from maple_engine.floats import Float3


@dataclass
class Vector3D:
    """A mutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_points(cls, start: Iterable[float], end: Iterable[float]) -> Vector3D:
        """Return the vector pointing from ``start`` to ``end``."""
        sx, sy, sz = start
        ex, ey, ez = end
        return cls(ex - sx, ey - sy, ez - sz)

    @classmethod
    def from_float3(cls, value: Float3) -> Vector3D:
        return cls(value.x, value.y, value.z)

    def to_float3(self) -> Float3:
        return Float3(self.x, self.y, self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> None:
        """Scale to unit length in place; a zero vector is left unchanged."""
        length = self.length()
        if length == 0.0:
            return
        self.x /= length
        self.y /= length
        self.z /= length

    def normalized(self) -> Vector3D:
        result = Vector3D(self.x, self.y, self.z)
        result.normalize()
        return result

    def dot(self, other: Iterable[float]) -> float:
        ox, oy, oz = other
        return self.x * ox + self.y * oy + self.z * oz

    def cross(self, other: Iterable[float]) -> Vector3D:
        ox, oy, oz = other
        return Vector3D(
            self.y * oz - self.z * oy,
            self.z * ox - self.x * oz,
            self.x * oy - self.y * ox,
        )

    def angle_to(self, other: Iterable[float]) -> float:
        """Angle in radians between the directions of the two vectors."""
        a = self.normalized()
        b = Vector3D(*other).normalized()
        cosine = max(-1.0, min(1.0, a.dot(b)))
        return math.acos(cosine)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Iterable[float]) -> Vector3D:
        result = Vector3D(self.x, self.y, self.z)
        result += other
        return result

    def __sub__(self, other: Iterable[float]) -> Vector3D:
        result = Vector3D(self.x, self.y, self.z)
        result -= other
        return result

    def __mul__(self, k: float) -> Vector3D:
        return Vector3D(self.x * k, self.y * k, self.z * k)

    def __rmul__(self, k: float) -> Vector3D:
        return self * k

    def __truediv__(self, k: float) -> Vector3D:
        return Vector3D(self.x / k, self.y / k, self.z / k)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Iterable[float]) -> Vector3D:
        ox, oy, oz = other
        self.x += ox
        self.y += oy
        self.z += oz
        return self

    def __isub__(self, other: Iterable[float]) -> Vector3D:
        ox, oy, oz = other
        self.x -= ox
        self.y -= oy
        self.z -= oz
        return self

    def __imul__(self, k: float) -> Vector3D:
        self.x *= k
        self.y *= k
        self.z *= k
        return self


def up_vector(right: Iterable[float], front: Iterable[float] = (0.0, 0.0, 1.0)) -> Vector3D:
    """Unit up vector from a right and a front direction."""
    r = Vector3D(*right).normalized()
    f = Vector3D(*front).normalized()
    return f.cross(r).normalized()


def right_vector(front: Iterable[float], up: Iterable[float] = (0.0, 1.0, 0.0)) -> Vector3D:
    """Unit right vector from a front and an up direction."""
    f = Vector3D(*front).normalized()
    u = Vector3D(*up).normalized()
    return u.cross(f).normalized()


def triangle_normal(
    v0: Iterable[float], v1: Iterable[float], v2: Iterable[float]
) -> Vector3D:
    """Unit normal of the triangle ``v0, v1, v2``."""
    edge1 = Vector3D.from_points(v0, v1).normalized()
    p1 = list(v1)
    edge2 = Vector3D.from_points(p1, v2).normalized()
    return edge1.cross(edge2).normalized()