"""Vector, matrix, quaternion, camera, lighting and input-state helpers for a small 3D engine."""

__version__ = "0.1.0"