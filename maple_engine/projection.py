"""Left-handed perspective projection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from maple_engine.matrix import Matrix


def perspective_fov_lh(fov_angle: float, aspect_ratio: float, near_z: float, far_z: float) -> Matrix:
    """Left-handed perspective matrix mapping depth from ``near_z``..``far_z`` to 0..1."""
    if near_z <= 0.0 or far_z <= 0.0:
        raise ValueError("clip distances must be positive")
    if math.isclose(near_z, far_z, rel_tol=0.0, abs_tol=1e-5):
        raise ValueError("near and far clip distances must differ")
    if math.isclose(fov_angle, 0.0, abs_tol=2e-5):
        raise ValueError("field of view must not be zero")
    if math.isclose(aspect_ratio, 0.0, abs_tol=1e-5):
        raise ValueError("aspect ratio must not be zero")
    half = fov_angle * 0.5
    height = math.cos(half) / math.sin(half)
    width = height / aspect_ratio
    depth = far_z / (far_z - near_z)
    return Matrix((
        width, 0.0, 0.0, 0.0,
        0.0, height, 0.0, 0.0,
        0.0, 0.0, depth, 1.0,
        0.0, 0.0, -depth * near_z, 0.0,
    ))


@dataclass
class Projection:
    """A projection matrix together with the parameters that built it."""

    mat: Matrix = field(default_factory=Matrix.identity)
    fov_angle: float = 0.0
    aspect_ratio: float = 0.0
    near_z: float = 0.0
    far_z: float = 0.0

    def create(self, fov_angle: float, aspect_ratio: float, near_z: float, far_z: float) -> None:
        """Store the parameters and build the matrix from them."""
        self.fov_angle = fov_angle
        self.aspect_ratio = aspect_ratio
        self.near_z = near_z
        self.far_z = far_z
        self.mat = perspective_fov_lh(fov_angle, aspect_ratio, near_z, far_z)

    def update(self) -> None:
        """Rebuild the matrix from the stored parameters."""
        self.mat = perspective_fov_lh(self.fov_angle, self.aspect_ratio, self.near_z, self.far_z)