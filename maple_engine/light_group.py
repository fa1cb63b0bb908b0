"""A fixed set of lights and shadows and the constant buffer they are written to."""

from __future__ import annotations

import copy
import struct
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, TypeVar

from maple_engine.floats import Float2, Float3
from maple_engine.lights import (
    CircleShadow,
    CircleShadowData,
    DirLight,
    DirLightData,
    PointLight,
    PointLightData,
    SpotLight,
    SpotLightData,
)
from maple_engine.vector3d import Vector3D

DIR_LIGHT_NUM = 3
POINT_LIGHT_NUM = 3
SPOT_LIGHT_NUM = 3
CIRCLE_SHADOW_NUM = 1

_AMBIENT_LAYOUT = struct.Struct("<3ff")

_T = TypeVar("_T")


def _float3(value: Iterable[float]) -> Float3:
    x, y, z = value
    return Float3(x, y, z)


def _vector(value: Iterable[float]) -> Vector3D:
    x, y, z = value
    return Vector3D(x, y, z)


def _float2(value: Float2) -> Float2:
    return Float2(value.x, value.y)


@dataclass
class LightGroupBuffer:
    """Constant-buffer contents of a light group."""

    ambient_color: Float3 = field(default_factory=Float3)
    dir_lights: List[DirLightData] = field(
        default_factory=lambda: [DirLightData() for _ in range(DIR_LIGHT_NUM)]
    )
    point_lights: List[PointLightData] = field(
        default_factory=lambda: [PointLightData() for _ in range(POINT_LIGHT_NUM)]
    )
    spot_lights: List[SpotLightData] = field(
        default_factory=lambda: [SpotLightData() for _ in range(SPOT_LIGHT_NUM)]
    )
    circle_shadows: List[CircleShadowData] = field(
        default_factory=lambda: [CircleShadowData() for _ in range(CIRCLE_SHADOW_NUM)]
    )

    def pack(self) -> bytes:
        """Serialize the buffer in GPU layout, little-endian."""
        records = [*self.dir_lights, *self.point_lights, *self.spot_lights, *self.circle_shadows]
        return _AMBIENT_LAYOUT.pack(*self.ambient_color, 0.0) + b"".join(
            record.pack() for record in records
        )


def _pick(items: Sequence[_T], index: int, kind: str) -> _T:
    if not isinstance(index, int) or not 0 <= index < len(items):
        raise IndexError(f"{kind} index must be from 0 to {len(items) - 1}, got {index!r}")
    return items[index]


class LightGroup:
    """Directional, point and spot lights plus circle shadows.

    Changes are marked and written to :attr:`buffer` by :meth:`update`.
    A new group holds the default light set, already transferred.
    """

    def __init__(self) -> None:
        self.ambient_color = Float3(1.0, 1.0, 1.0)
        self.dir_lights = [DirLight() for _ in range(DIR_LIGHT_NUM)]
        self.point_lights = [PointLight() for _ in range(POINT_LIGHT_NUM)]
        self.spot_lights = [SpotLight() for _ in range(SPOT_LIGHT_NUM)]
        self.circle_shadows = [CircleShadow() for _ in range(CIRCLE_SHADOW_NUM)]
        self.needs_update = False
        self.buffer = LightGroupBuffer()
        self.default_light_set()
        self.transfer()

    def default_light_set(self) -> None:
        """Configure the standard lights: one active directional light, the rest off."""
        defaults = [
            (True, (-1.0, -1.0, 0.0), 1.0),
            (False, (0.5, 0.1, 0.2), 3.0),
            (False, (-0.5, 0.1, -0.2), 3.0),
        ]
        for light, (active, direction, shininess) in zip(self.dir_lights, defaults):
            light.active = active
            light.color = Float3(1.0, 1.0, 1.0)
            light.direction = Vector3D(*direction)
            light.shininess = shininess

        point_defaults = [
            ((0.0, 2.0, 10.0), (0.01, 0.01, 0.01)),
            ((10.0, 2.0, 20.0), (1.0, 1.0, 1.0)),
            ((10.0, 2.0, 20.0), (0.001, 0.001, 0.001)),
        ]
        for light, (position, atten) in zip(self.point_lights, point_defaults):
            light.active = False
            light.position = Float3(*position)
            light.color = Float3(1.0, 1.0, 1.0)
            light.atten = Float3(*atten)

        shadow = self.circle_shadows[0]
        shadow.active = False
        shadow.caster_pos = Float3(0.0, 2.0, 10.0)
        shadow.direction = Vector3D(0.0, -1.0, 0.0)
        shadow.distance_caster_light = -0.9
        shadow.factor_angle_cos = Float2(1.0, 0.1)
        shadow.atten = Float3(0.9, 2.6, 0.0)

        spot_defaults = [
            ((0.0, 3.0, 20.0), (0.0, -1.0, 0.0), Float2(5.0, 5.0)),
            ((10.0, 2.0, 20.0), (0.0, 0.0, 0.0), Float2(5.0, 5.0)),
            ((10.0, 2.0, 20.0), (0.001, 0.001, 0.001), Float2(0.001, 0.001)),
        ]
        for light, (position, direction, factor) in zip(self.spot_lights, spot_defaults):
            light.active = False
            light.position = Float3(*position)
            light.color = Float3(1.0, 1.0, 1.0)
            light.atten = Float3(0.001, 0.001, 0.001)
            light.direction = Vector3D(*direction)
            light.set_factor_angle(factor)

        self.needs_update = True

    def update(self) -> bool:
        """Transfer to the buffer if anything changed; return whether it did."""
        if not self.needs_update:
            return False
        self.transfer()
        self.needs_update = False
        return True

    def transfer(self) -> None:
        """Write the current settings into the buffer.

        Inactive entries only have their ``active`` flag cleared.
        """
        buf = self.buffer
        buf.ambient_color = _float3(self.ambient_color)

        for light, data in zip(self.dir_lights, buf.dir_lights):
            data.active = light.active
            if light.active:
                data.light_v = -light.direction
                data.color = _float3(light.color)
                data.shininess = light.shininess

        for light, data in zip(self.point_lights, buf.point_lights):
            data.active = light.active
            if light.active:
                data.position = _float3(light.position)
                data.color = _float3(light.color)
                data.atten = _float3(light.atten)
                data.shininess = light.shininess

        for light, data in zip(self.spot_lights, buf.spot_lights):
            data.active = light.active
            if light.active:
                data.light_vec = -light.direction
                data.position = _float3(light.position)
                data.color = _float3(light.color)
                data.atten = _float3(light.atten)
                data.shininess = light.shininess
                data.factor_angle_cos = _float2(light.factor_angle_cos)

        for shadow, data in zip(self.circle_shadows, buf.circle_shadows):
            data.active = shadow.active
            if shadow.active:
                data.direction = -shadow.direction
                data.caster_pos = _float3(shadow.caster_pos)
                data.distance_caster_light = shadow.distance_caster_light
                data.atten = _float3(shadow.atten)
                data.factor_angle_cos = _float2(shadow.factor_angle_cos)

    def set_ambient_color(self, color: Iterable[float]) -> None:
        self.ambient_color = _float3(color)
        self.needs_update = True

    def dir_light(self, index: int) -> DirLight:
        """A copy of the directional light at ``index``."""
        return copy.deepcopy(_pick(self.dir_lights, index, "directional light"))

    def set_dir_light(
        self,
        index: int,
        *,
        active: Optional[bool] = None,
        direction: Optional[Iterable[float]] = None,
        color: Optional[Iterable[float]] = None,
        shininess: Optional[float] = None,
    ) -> None:
        """Change the given settings of a directional light."""
        light = _pick(self.dir_lights, index, "directional light")
        if active is not None:
            light.active = active
        if direction is not None:
            light.direction = _vector(direction)
        if color is not None:
            light.color = _float3(color)
        if shininess is not None:
            light.shininess = shininess
        self.needs_update = True

    def point_light(self, index: int) -> PointLight:
        """A copy of the point light at ``index``."""
        return copy.deepcopy(_pick(self.point_lights, index, "point light"))

    def set_point_light(
        self,
        index: int,
        *,
        active: Optional[bool] = None,
        position: Optional[Iterable[float]] = None,
        color: Optional[Iterable[float]] = None,
        atten: Optional[Iterable[float]] = None,
        shininess: Optional[float] = None,
    ) -> None:
        """Change the given settings of a point light."""
        light = _pick(self.point_lights, index, "point light")
        if active is not None:
            light.active = active
        if position is not None:
            light.position = _float3(position)
        if color is not None:
            light.color = _float3(color)
        if atten is not None:
            light.atten = _float3(atten)
        if shininess is not None:
            light.shininess = shininess
        self.needs_update = True

    def spot_light(self, index: int) -> SpotLight:
        """A copy of the spot light at ``index``."""
        return copy.deepcopy(_pick(self.spot_lights, index, "spot light"))

    def set_spot_light(
        self,
        index: int,
        *,
        active: Optional[bool] = None,
        direction: Optional[Iterable[float]] = None,
        position: Optional[Iterable[float]] = None,
        color: Optional[Iterable[float]] = None,
        atten: Optional[Iterable[float]] = None,
        shininess: Optional[float] = None,
    ) -> None:
        """Change the given settings of a spot light."""
        light = _pick(self.spot_lights, index, "spot light")
        if active is not None:
            light.active = active
        if direction is not None:
            light.direction = _vector(direction)
        if position is not None:
            light.position = _float3(position)
        if color is not None:
            light.color = _float3(color)
        if atten is not None:
            light.atten = _float3(atten)
        if shininess is not None:
            light.shininess = shininess
        self.needs_update = True

    def circle_shadow(self, index: int) -> CircleShadow:
        """A copy of the circle shadow at ``index``."""
        return copy.deepcopy(_pick(self.circle_shadows, index, "circle shadow"))

    def set_circle_shadow(
        self,
        index: int,
        *,
        active: Optional[bool] = None,
        caster_pos: Optional[Iterable[float]] = None,
        direction: Optional[Iterable[float]] = None,
        distance_caster_light: Optional[float] = None,
        atten: Optional[Iterable[float]] = None,
        factor_angle_cos: Optional[Float2] = None,
    ) -> None:
        """Change the given settings of a circle shadow."""
        shadow = _pick(self.circle_shadows, index, "circle shadow")
        if active is not None:
            shadow.active = active
        if caster_pos is not None:
            shadow.caster_pos = _float3(caster_pos)
        if direction is not None:
            shadow.direction = _vector(direction)
        if distance_caster_light is not None:
            shadow.distance_caster_light = distance_caster_light
        if atten is not None:
            shadow.atten = _float3(atten)
        if factor_angle_cos is not None:
            shadow.factor_angle_cos = _float2(factor_angle_cos)
        self.needs_update = True