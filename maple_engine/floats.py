"""Small fixed-size float records shared by the math and lighting code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class Float2:
    """A pair of floats."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Float3:
    """Three floats, usable as a point, a colour or an attenuation triple."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __iadd__(self, other: Iterable[float]) -> Float3:
        ox, oy, oz = other
        self.x += ox
        self.y += oy
        self.z += oz
        return self

    def __isub__(self, other: Iterable[float]) -> Float3:
        ox, oy, oz = other
        self.x -= ox
        self.y -= oy
        self.z -= oz
        return self

    def __sub__(self, other: Iterable[float]) -> Float3:
        result = Float3(self.x, self.y, self.z)
        result -= other
        return result


@dataclass
class Float4:
    """Four floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0