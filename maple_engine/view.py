"""Left-handed view (camera) matrices and billboard rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from maple_engine.matrix import Matrix
from maple_engine.vector3d import Vector3D


def _check(vector: Vector3D, name: str) -> None:
    if vector.x == 0.0 and vector.y == 0.0 and vector.z == 0.0:
        raise ValueError(f"{name} must not be zero")
    if any(math.isinf(c) for c in vector):
        raise ValueError(f"{name} must be finite")


def _camera_axes(
    eye: Vector3D, target: Vector3D, up: Vector3D
) -> Tuple[Vector3D, Vector3D, Vector3D]:
    axis_z = target - eye
    _check(axis_z, "view direction")
    _check(up, "up vector")
    axis_z = axis_z.normalized()
    axis_x = up.cross(axis_z).normalized()
    axis_y = axis_z.cross(axis_x).normalized()
    return axis_x, axis_y, axis_z


def _view_matrix(eye: Vector3D, axes: Tuple[Vector3D, Vector3D, Vector3D]) -> Matrix:
    axis_x, axis_y, axis_z = axes
    back = -eye
    return Matrix((
        axis_x.x, axis_y.x, axis_z.x, 0.0,
        axis_x.y, axis_y.y, axis_z.y, 0.0,
        axis_x.z, axis_y.z, axis_z.z, 0.0,
        axis_x.dot(back), axis_y.dot(back), axis_z.dot(back), 1.0,
    ))


def look_at_lh(eye: Iterable[float], target: Iterable[float], up: Iterable[float]) -> Matrix:
    """Left-handed view matrix of a camera at ``eye`` looking at ``target``."""
    e = Vector3D(*eye)
    return _view_matrix(e, _camera_axes(e, Vector3D(*target), Vector3D(*up)))


@dataclass
class View:
    """A camera: its position, target and up vector, and the matrices built from them."""

    mat: Matrix = field(default_factory=Matrix.identity)
    eye: Vector3D = field(default_factory=lambda: Vector3D(0.0, 0.0, 0.0))
    target: Vector3D = field(default_factory=lambda: Vector3D(0.0, 0.0, 1.0))
    up: Vector3D = field(default_factory=lambda: Vector3D(0.0, 1.0, 0.0))
    bill_mat: Matrix = field(default_factory=Matrix.identity)

    def create(self, eye: Iterable[float], target: Iterable[float], up: Iterable[float]) -> None:
        """Store the camera parameters and build the view matrix."""
        self.eye = Vector3D(*eye)
        self.target = Vector3D(*target)
        self.up = Vector3D(*up)
        self.mat = look_at_lh(self.eye, self.target, self.up)

    def update(self, billboard_y: bool = False) -> None:
        """Rebuild the view matrix and the billboard matrix from the stored parameters.

        With ``billboard_y`` the billboard only turns around the up axis.
        """
        axes = _camera_axes(self.eye, self.target, self.up)
        self.mat = _view_matrix(self.eye, axes)
        axis_x, axis_y, axis_z = axes
        if billboard_y:
            bill_y = self.up.normalized()
            rows = (axis_x, bill_y, axis_x.cross(bill_y))
        else:
            rows = (axis_x, axis_y, axis_z)
        self.bill_mat = Matrix.from_rows(
            [(r.x, r.y, r.z, 0.0) for r in rows] + [(0.0, 0.0, 0.0, 1.0)]
        )