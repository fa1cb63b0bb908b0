"""Row-major 4x4 matrices using the row-vector convention."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple, Union

from maple_engine.vector3d import Vector3D

_IDENTITY: Tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

Rows = Tuple[Tuple[float, float, float, float], ...]


@dataclass(frozen=True)
class Matrix:
    """An immutable 4x4 matrix stored as 16 floats in row-major order.

    Element ``_rc`` (row ``r``, column ``c``, both starting at 1) lives at
    index ``4 * (r - 1) + (c - 1)``.  A default matrix is the identity.
    """

    values: Sequence[float] = _IDENTITY

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError(f"a matrix needs 16 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    @classmethod
    def identity(cls) -> Matrix:
        return cls(_IDENTITY)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from four rows of four values each."""
        row_list = [tuple(row) for row in rows]
        if len(row_list) != 4 or any(len(row) != 4 for row in row_list):
            raise ValueError("a matrix needs four rows of four values")
        return cls(tuple(v for row in row_list for v in row))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix:
        values = list(_IDENTITY)
        values[12], values[13], values[14] = x, y, z
        return cls(values)

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix:
        values = list(_IDENTITY)
        values[0], values[5], values[10] = x, y, z
        return cls(values)

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        values = list(_IDENTITY)
        values[5], values[6] = c, s
        values[9], values[10] = -s, c
        return cls(values)

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        values = list(_IDENTITY)
        values[0], values[2] = c, s
        values[8], values[10] = -s, c
        return cls(values)

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix:
        c, s = math.cos(angle), math.sin(angle)
        values = list(_IDENTITY)
        values[0], values[1] = c, s
        values[4], values[5] = -s, c
        return cls(values)

    @classmethod
    def rotation_axis(cls, angle: float, axis: Iterable[float]) -> Matrix:
        """Rotation by ``angle`` radians around ``axis``, which should be unit length."""
        x, y, z = axis
        c, s = math.cos(angle), math.sin(angle)
        t = 1.0 - c
        return cls((
            x * x * t + c, x * y * t - z * s, x * z * t + y * s, 0.0,
            x * y * t + z * s, y * y * t + c, y * z * t + x * s, 0.0,
            x * z * t - y * s, y * z * t + x * s, z * z * t + c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def rows(self) -> Rows:
        v = self.values
        return tuple(tuple(v[r * 4:r * 4 + 4]) for r in range(4))  # type: ignore[return-value]

    def transposed(self) -> Matrix:
        return Matrix.from_rows(zip(*self.rows()))

    def inverse(self) -> Matrix:
        """Gauss-Jordan inverse without pivoting.

        Raises ZeroDivisionError when a diagonal pivot becomes zero.
        """
        augmented = [
            list(row) + [1.0 if i == j else 0.0 for j in range(4)]
            for i, row in enumerate(self.rows())
        ]
        for k, pivot_row in enumerate(augmented):
            pivot = pivot_row[k]
            if pivot == 0.0:
                raise ZeroDivisionError("matrix cannot be inverted without pivoting")
            scale = 1.0 / pivot
            pivot_row[:] = [value * scale for value in pivot_row]
            for i, row in enumerate(augmented):
                if i == k:
                    continue
                factor = -row[k]
                row[:] = [a + b * factor for a, b in zip(row, pivot_row)]
        return Matrix.from_rows(row[4:] for row in augmented)

    def __getitem__(self, index: int) -> float:
        if not isinstance(index, int) or not 0 <= index < 16:
            raise IndexError("matrix index must be an integer from 0 to 15")
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __mul__(self, other: Union[Matrix, float]) -> Matrix:
        if isinstance(other, Matrix):
            columns = list(zip(*other.rows()))
            return Matrix(
                sum(a * b for a, b in zip(row, column))
                for row in self.rows()
                for column in columns
            )
        if isinstance(other, (int, float)):
            return Matrix(v * other for v in self.values)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, s: float) -> Matrix:
        return Matrix(v / s for v in self.values)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(a + b for a, b in zip(self.values, other.values))

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(a - b for a, b in zip(self.values, other.values))


def transform(v: Iterable[float], m: Matrix) -> Vector3D:
    """Transform the point ``v`` by ``m``, dividing by the resulting w."""
    x, y, z = v
    m11, m12, m13, m14, m21, m22, m23, m24, m31, m32, m33, m34, m41, m42, m43, m44 = m
    w = x * m14 + y * m24 + z * m34 + m44
    return Vector3D(
        (x * m11 + y * m21 + z * m31 + m41) / w,
        (x * m12 + y * m22 + z * m32 + m42) / w,
        (x * m13 + y * m23 + z * m33 + m43) / w,
    )


def translation_of(m: Matrix) -> Vector3D:
    """The translation part (fourth row) of ``m``."""
    return Vector3D(m[12], m[13], m[14])