"""Quaternions for rotations, with interpolation and vector rotation helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from maple_engine.matrix import Matrix
from maple_engine.vector3d import Vector3D

FLT_EPSILON = 1.1920929e-07


@dataclass
class Quaternion:
    """A mutable quaternion ``x i + y j + z k + w``; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Iterable[float], angle: float) -> Quaternion:
        """Rotation by ``angle`` radians around ``axis``."""
        v = Vector3D(*axis).normalized()
        s = math.sin(angle / 2)
        result = cls(s * v.x, s * v.y, s * v.z, math.cos(angle / 2))
        result.normalize()
        return result

    @classmethod
    def from_euler(cls, euler: Iterable[float]) -> Quaternion:
        """Rotation from Euler angles: x is pitch, y is heading, z is bank."""
        pitch, heading, bank = euler
        sp, cp = math.sin(pitch * 0.5), math.cos(pitch * 0.5)
        sb, cb = math.sin(bank * 0.5), math.cos(bank * 0.5)
        sh, ch = math.sin(heading * 0.5), math.cos(heading * 0.5)
        return cls(
            ch * sp * cb + sh * cp * sb,
            -ch * sp * sb + sh * cp * cb,
            -sh * sp * cb + ch * cp * sb,
            ch * cp * cb + sh * sp * sb,
        )

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> None:
        """Scale to unit length in place; a zero quaternion is left unchanged."""
        mag = self.norm()
        if mag > 0.0:
            inv = 1.0 / mag
            self.x *= inv
            self.y *= inv
            self.z *= inv
            self.w *= inv

    def normalized(self) -> Quaternion:
        result = Quaternion(self.x, self.y, self.z, self.w)
        result.normalize()
        return result

    def conjugated(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def reciprocal(self) -> Quaternion:
        conj = self.conjugated()
        sq = self.norm() ** 2
        return Quaternion(conj.x / sq, conj.y / sq, conj.z / sq, conj.w / sq)

    def to_matrix(self) -> Matrix:
        """Rotation matrix in the row-vector convention."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Matrix((
            1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * w * z, 2 * x * z - 2 * w * y, 0.0,
            2 * x * y - 2 * w * z, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * w * x, 0.0,
            2 * x * z + 2 * w * y, 2 * y * z - 2 * w * x, 1 - 2 * x * x - 2 * y * y, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    def rotation_axis(self) -> Vector3D:
        """Axis of the rotation; the z axis when there is no rotation."""
        sin_sq = 1.0 - self.w * self.w
        if sin_sq <= 0.0:
            return Vector3D(0.0, 0.0, 1.0)
        inv = 1.0 / math.sqrt(sin_sq)
        return Vector3D(self.x * inv, self.y * inv, self.z * inv)

    def angle(self) -> float:
        """Rotation angle in radians."""
        return safe_acos(self.w) * 2.0

    def __neg__(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, k: float) -> Quaternion:
        if not isinstance(k, (int, float)):
            return NotImplemented
        return Quaternion(self.x * k, self.y * k, self.z * k, self.w * k)

    def __rmul__(self, k: float) -> Quaternion:
        return self.__mul__(k)

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)


def product(q: Quaternion, p: Quaternion) -> Quaternion:
    """The normalized Hamilton product ``q * p``."""
    result = Quaternion(
        q.x * p.w + q.y * p.z - q.z * p.y + q.w * p.x,
        -q.x * p.z + q.y * p.w + q.z * p.x + q.w * p.y,
        q.x * p.y - q.y * p.x + q.z * p.w + q.w * p.z,
        -q.x * p.x - q.y * p.y - q.z * p.z + q.w * p.w,
    )
    result.normalize()
    return result


def dot(a: Quaternion, b: Quaternion) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def angle_between(a: Quaternion, b: Quaternion) -> float:
    """Angle between two quaternions, treating ``q`` and ``-q`` alike."""
    return safe_acos(abs(dot(a, b)))


def _lerp(a: Quaternion, b: Quaternion, t: float) -> Quaternion:
    result = Quaternion(
        (1.0 - t) * a.x + t * b.x,
        (1.0 - t) * a.y + t * b.y,
        (1.0 - t) * a.z + t * b.z,
        (1.0 - t) * a.w + t * b.w,
    )
    result.normalize()
    return result


def _weighted(a: Quaternion, b: Quaternion, angle: float, t: float) -> Quaternion:
    st = math.sin(angle)
    c1 = math.sin(angle * (1.0 - t)) / st
    c2 = math.sin(angle * t) / st
    result = Quaternion(
        c1 * a.x + c2 * b.x,
        c1 * a.y + c2 * b.y,
        c1 * a.z + c2 * b.z,
        c1 * a.w + c2 * b.w,
    )
    result.normalize()
    return result


def slerp(start: Quaternion, end: Quaternion, t: float) -> Quaternion:
    """Spherical interpolation with ``t`` from 0 to 1."""
    if start == end:
        return Quaternion(start.x, start.y, start.z, start.w)
    d = dot(start, end)
    target = -end if d < 0 else end
    if d >= 1.0 - FLT_EPSILON:
        return _lerp(start, target, t)
    angle = math.acos(max(-1.0, d))
    if math.sin(angle) == 0:
        return -start
    return _weighted(start, target, angle, t)


def slerp_steps(start: Quaternion, end: Quaternion, time: int, max_time: int) -> Quaternion:
    """Spherical interpolation at step ``time`` of ``max_time``."""
    t = time / max_time
    d = dot(start, end)
    origin = -start if d < 0 else start
    if d >= 1.0 - FLT_EPSILON:
        return _lerp(origin, end, t)
    angle = math.acos(max(-1.0, d))
    if math.sin(angle) == 0:
        return -start
    return _weighted(start, end, angle, t)


def rotate_by(rotation: Quaternion, position: Iterable[float]) -> Vector3D:
    """Rotate the direction of ``position`` by ``rotation``; the result is unit length."""
    v = Vector3D(*position).normalized()
    result = product(rotation, Quaternion(v.x, v.y, v.z, 0.0))
    result = product(result, rotation.reciprocal())
    result.normalize()
    return Vector3D(result.x, result.y, result.z)


def rotate_around_axis(axis: Iterable[float], position: Iterable[float], angle: float) -> Vector3D:
    """Rotate the direction of ``position`` by ``angle`` radians around ``axis``."""
    return rotate_by(Quaternion.from_axis_angle(axis, angle), position)


def dir_to_dir(u: Iterable[float], v: Iterable[float]) -> Quaternion:
    """Rotation that turns direction ``u`` into direction ``v``."""
    a = Vector3D(*u).normalized()
    b = Vector3D(*v).normalized()
    axis = a.cross(b).normalized()
    return Quaternion.from_axis_angle(axis, safe_acos(a.dot(b)))


def safe_acos(a: float) -> float:
    """Arc cosine that clamps its argument to [-1, 1]."""
    if a <= -1.0:
        return math.pi
    if a >= 1.0:
        return 0.0
    return math.acos(a)