"""Directional, point and spot lights, circle shadows and their GPU buffer records."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from maple_engine.floats import Float2, Float3
from maple_engine.vector3d import Vector3D

_DIR_LIGHT_LAYOUT = struct.Struct("<3ff3fI")
_POINT_LIGHT_LAYOUT = struct.Struct("<3ff3ff3fI")
_SPOT_LIGHT_LAYOUT = struct.Struct("<3ff3ff3ff3ff2fIf")
_CIRCLE_SHADOW_LAYOUT = struct.Struct("<3ff3ff3ff2fIf")


@dataclass
class DirLight:
    """A directional light."""

    direction: Vector3D = field(default_factory=lambda: Vector3D(1.0, 0.0, 0.0))
    color: Float3 = field(default_factory=lambda: Float3(1.0, 1.0, 1.0))
    shininess: float = 3.0
    active: bool = False


@dataclass
class PointLight:
    """A point light; larger attenuation values make the light fade faster."""

    position: Float3 = field(default_factory=lambda: Float3(0.0, 0.0, 0.0))
    color: Float3 = field(default_factory=lambda: Float3(1.0, 1.0, 1.0))
    atten: Float3 = field(default_factory=lambda: Float3(1.0, 1.0, 1.0))
    shininess: float = 3.0
    active: bool = False


@dataclass
class SpotLight:
    """A spot light with a cone given by two angle factors."""

    direction: Vector3D = field(default_factory=lambda: Vector3D(1.0, 0.0, 0.0))
    position: Float3 = field(default_factory=lambda: Float3(0.0, 0.0, 0.0))
    color: Float3 = field(default_factory=lambda: Float3(1.0, 1.0, 1.0))
    atten: Float3 = field(default_factory=lambda: Float3(1.0, 1.0, 1.0))
    factor_angle_cos: Float2 = field(default_factory=lambda: Float2(0.5, 0.2))
    shininess: float = 3.0
    active: bool = False

    def set_factor_angle(self, factor: Float2, convert: bool = True) -> None:
        """Set the cone factors; with ``convert`` they are given in degrees."""
        if convert:
            self.factor_angle_cos = Float2(
                factor.x * math.pi / 180.0, factor.y * math.pi / 180.0
            )
        else:
            self.factor_angle_cos = Float2(factor.x, factor.y)


@dataclass
class CircleShadow:
    """A round shadow cast by an object at ``caster_pos``."""

    direction: Vector3D = field(default_factory=lambda: Vector3D(1.0, 0.0, 0.0))
    distance_caster_light: float = 100.0
    caster_pos: Float3 = field(default_factory=lambda: Float3(0.0, 0.0, 0.0))
    atten: Float3 = field(default_factory=lambda: Float3(0.5, 0.6, 0.0))
    factor_angle_cos: Float2 = field(default_factory=lambda: Float2(0.2, 0.5))
    active: bool = False


@dataclass
class DirLightData:
    """Constant-buffer record of a directional light (32 bytes)."""

    light_v: Vector3D = field(default_factory=Vector3D)
    shininess: float = 0.0
    color: Float3 = field(default_factory=Float3)
    active: bool = False

    def pack(self) -> bytes:
        return _DIR_LIGHT_LAYOUT.pack(
            *self.light_v, self.shininess, *self.color, int(self.active)
        )


@dataclass
class PointLightData:
    """Constant-buffer record of a point light (48 bytes)."""

    position: Float3 = field(default_factory=Float3)
    shininess: float = 0.0
    color: Float3 = field(default_factory=Float3)
    atten: Float3 = field(default_factory=Float3)
    active: bool = False

    def pack(self) -> bytes:
        return _POINT_LIGHT_LAYOUT.pack(
            *self.position,
            self.shininess,
            *self.color,
            0.0,
            *self.atten,
            int(self.active),
        )


@dataclass
class SpotLightData:
    """Constant-buffer record of a spot light (80 bytes)."""

    light_vec: Vector3D = field(default_factory=Vector3D)
    shininess: float = 0.0
    position: Float3 = field(default_factory=Float3)
    color: Float3 = field(default_factory=Float3)
    atten: Float3 = field(default_factory=Float3)
    factor_angle_cos: Float2 = field(default_factory=Float2)
    active: bool = False

    def pack(self) -> bytes:
        return _SPOT_LIGHT_LAYOUT.pack(
            *self.light_vec,
            self.shininess,
            *self.position,
            0.0,
            *self.color,
            0.0,
            *self.atten,
            0.0,
            self.factor_angle_cos.x,
            self.factor_angle_cos.y,
            int(self.active),
            0.0,
        )


@dataclass
class CircleShadowData:
    """Constant-buffer record of a circle shadow (64 bytes)."""

    direction: Vector3D = field(default_factory=Vector3D)
    distance_caster_light: float = 0.0
    caster_pos: Float3 = field(default_factory=Float3)
    atten: Float3 = field(default_factory=Float3)
    factor_angle_cos: Float2 = field(default_factory=Float2)
    active: bool = False

    def pack(self) -> bytes:
        return _CIRCLE_SHADOW_LAYOUT.pack(
            *self.direction,
            self.distance_caster_light,
            *self.caster_pos,
            0.0,
            *self.atten,
            0.0,
            self.factor_angle_cos.x,
            self.factor_angle_cos.y,
            int(self.active),
            0.0,
        )