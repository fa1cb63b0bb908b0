# maple_engine

The maths, camera, lighting and input-state layer of a small 3D engine.
It is written in pure Python and has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `maple_engine.floats`: `Float2`, `Float3` and `Float4`, small mutable value types. `Float3` can be iterated and supports `+=`, `-=` and `-`.
- `maple_engine.vector3d`: `Vector3D`. It has `length`, `normalize` (which leaves a zero vector unchanged), `normalized`, `dot`, `cross`, `angle_to` and the arithmetic operators. `Vector3D.from_points(start, end)` builds the vector between two points. The module also has `up_vector`, `right_vector` and `triangle_normal`.
- `maple_engine.vector2d`: `Vector2D`, with `dot`, `cross`, `length`, `normalize` and arithmetic. It also has the functions `vector_between` and `cross`, and `contains_point(points, point)`, which tests a point against a counter-clockwise convex polygon.
- `maple_engine.matrix`: `Matrix`, an immutable row-major 4×4 matrix in the row-vector convention. It has `identity`, `from_rows`, `translation`, `scaling`, `rotation_x`, `rotation_y`, `rotation_z` and `rotation_axis` builders. It also has `rows`, `transposed` and `inverse`. `inverse` is Gauss-Jordan without pivoting and raises `ZeroDivisionError` on a zero pivot. Indexing covers 0–15, and the operators are `*` (matrix or scalar), `/`, `+` and `-`. The module also has `transform(v, m)`, which divides by w, and `translation_of(m)`.
- `maple_engine.quaternion`: `Quaternion`. The default is the identity. It has the constructors `from_axis_angle` and `from_euler`, plus `norm`, `normalize`, `conjugated`, `reciprocal`, `to_matrix`, `rotation_axis` and `angle`. The module also has `product`, `dot`, `angle_between`, `slerp`, `slerp_steps`, `rotate_by`, `rotate_around_axis`, `dir_to_dir` and `safe_acos`.
- `maple_engine.projection`: `perspective_fov_lh` and `Projection`. `perspective_fov_lh` builds a left-handed perspective matrix and raises `ValueError` on bad parameters. `Projection` keeps the parameters and rebuilds the matrix with `update()`.
- `maple_engine.view`: `look_at_lh` and `View`. `View.update(billboard_y=False)` rebuilds the view matrix `mat` and the billboard rotation `bill_mat`.
- `maple_engine.world_matrix`: `WorldMatrix`. It holds scale, rotation and translation matrices and composes them as `mat_world = scale * rotation * translation`. Rotation angles are in degrees unless `degrees=False` is passed.
- `maple_engine.lights`: `DirLight`, `PointLight`, `SpotLight` and `CircleShadow`. Each has a matching constant-buffer record: `DirLightData`, `PointLightData`, `SpotLightData` and `CircleShadowData`. A record's `pack()` returns its little-endian bytes, padded for the GPU.
- `maple_engine.light_group`: `LightGroup`. It holds three directional, three point and three spot lights and one circle shadow. A new group starts with the default set, which has one active directional light. The `set_*` methods mark the group as changed. `update()` then writes the settings into `buffer`, a `LightGroupBuffer` whose `pack()` returns the whole constant buffer as bytes.
- `maple_engine.gamepad`: `GamePad`, `GamePadState`, `GamePadButton` and `Vibration`. It also has `stick_input` and `trigger_input`, which apply the dead zone and return a direction and a 0–1 magnitude.
- `maple_engine.input`: `Input`, `MouseState`, `MousePosition` and `MouseButton`. `Input` tracks 256 keys, the mouse and a `GamePad`. The `is_*_down`, `_up`, `_held`, `_triggered` and `_released` methods compare the current frame with the previous one.

Indices that are out of range raise `IndexError` throughout.

## Example

```python
import math
from maple_engine.vector3d import Vector3D
from maple_engine.matrix import Matrix, transform
from maple_engine.quaternion import Quaternion, slerp
from maple_engine.input import Input, MouseState

m = Matrix.rotation_z(math.pi / 2) * Matrix.translation(1, 0, 0)
p = transform(Vector3D(1, 0, 0), m)

a = Quaternion.identity()
b = Quaternion.from_axis_angle(Vector3D(0, 1, 0), math.pi / 2)
half_way = slerp(a, b, 0.5)

keys = bytearray(256)
keys[0x20] = 1
inp = Input()
inp.update(keys, MouseState(x=3, y=-1, buttons=[1]))
assert inp.is_key_triggered(0x20)
assert inp.is_mouse_down(0)
```

## What it does not do

This package computes values and records state. It stops there:

- It opens no window and talks to no graphics device.
- `LightGroupBuffer.pack()` produces bytes but uploads them nowhere.
- `GamePad` and `Input` do not read hardware. You pass them snapshots through `update(...)`.
- `GamePad.vibrate` only records the motor speeds in `vibrations`. It also hands them to the optional `vibration_sink` callable, if you give one.

There is no command-line program.