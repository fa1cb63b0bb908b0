"""World transforms composed as scale * rotation * translation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from maple_engine.matrix import Matrix
from maple_engine.view import View


def _radians(angle: float, degrees: bool) -> float:
    return math.radians(angle) if degrees else angle


def _rotation_x(angle: float) -> Matrix:
    return Matrix.rotation_x(angle)


def _rotation_y(angle: float) -> Matrix:
    # Left-handed y rotation: row 0 is (c, 0, -s, 0).
    return Matrix.rotation_y(-angle)


def _rotation_z(angle: float) -> Matrix:
    return Matrix.rotation_z(angle)


@dataclass
class WorldMatrix:
    """Scale, rotation and translation matrices and the world matrix they make."""

    mat_world: Matrix = field(default_factory=Matrix.identity)
    mat_scale: Matrix = field(default_factory=Matrix.identity)
    mat_rot: Matrix = field(default_factory=Matrix.identity)
    mat_trans: Matrix = field(default_factory=Matrix.identity)

    def rotate_x(self, angle: float, degrees: bool = True) -> None:
        """Append a rotation around x to the rotation matrix."""
        self.mat_rot = self.mat_rot * _rotation_x(_radians(angle, degrees))

    def rotate_y(self, angle: float, degrees: bool = True) -> None:
        """Append a rotation around y to the rotation matrix."""
        self.mat_rot = self.mat_rot * _rotation_y(_radians(angle, degrees))

    def rotate_z(self, angle: float, degrees: bool = True) -> None:
        """Append a rotation around z to the rotation matrix."""
        self.mat_rot = self.mat_rot * _rotation_z(_radians(angle, degrees))

    def set_rotation(
        self, angle_x: float, angle_y: float, angle_z: float, degrees: bool = True
    ) -> None:
        """Replace the rotation with z, then x, then y rotations."""
        self.mat_rot = Matrix.identity()
        self.apply_rotation(angle_x, angle_y, angle_z, degrees)

    def apply_rotation(
        self, angle_x: float, angle_y: float, angle_z: float, degrees: bool = True
    ) -> Matrix:
        """Append z, x and y rotations to the current rotation and return it."""
        self.mat_rot = (
            self.mat_rot
            * _rotation_z(_radians(angle_z, degrees))
            * _rotation_x(_radians(angle_x, degrees))
            * _rotation_y(_radians(angle_y, degrees))
        )
        return self.mat_rot

    def set_scale(self, x: float, y: float, z: float) -> None:
        self.mat_scale = Matrix.scaling(x, y, z)

    def set_translation(self, x: float, y: float, z: float) -> None:
        self.mat_trans = Matrix.translation(x, y, z)

    def create(self, scale: Matrix, rotation: Matrix, translation: Matrix) -> None:
        """Store the three parts and build the world matrix from them."""
        self.mat_scale = scale
        self.mat_rot = rotation
        self.mat_trans = translation
        self.update()

    def update(self) -> None:
        self.mat_world = self.mat_scale * self.mat_rot * self.mat_trans

    def update_billboard(self, view: View) -> None:
        """Build the world matrix with the view's billboard rotation applied first."""
        self.mat_world = view.bill_mat * self.mat_scale * self.mat_rot * self.mat_trans