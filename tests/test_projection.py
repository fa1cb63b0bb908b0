import math

import pytest

from maple_engine.matrix import transform
from maple_engine.projection import Projection, perspective_fov_lh


def test_near_plane_maps_to_zero_depth():
    m = perspective_fov_lh(math.radians(45), 16 / 9, 0.1, 1000.0)
    assert transform((0.0, 0.0, 0.1), m).z == pytest.approx(0.0, abs=1e-9)


def test_far_plane_maps_to_unit_depth():
    m = perspective_fov_lh(math.radians(45), 16 / 9, 0.1, 1000.0)
    assert transform((0.0, 0.0, 1000.0), m).z == pytest.approx(1.0)


def test_w_comes_from_view_depth():
    m = perspective_fov_lh(1.0, 1.5, 1.0, 10.0)
    assert m[11] == 1.0
    assert m[15] == 0.0


def test_aspect_ratio_scales_width():
    m = perspective_fov_lh(1.0, 2.0, 1.0, 10.0)
    assert m[0] * 2.0 == pytest.approx(m[5])


@pytest.mark.parametrize(
    "args",
    [
        (1.0, 1.0, 0.0, 10.0),
        (1.0, 1.0, 5.0, 5.0),
        (0.0, 1.0, 1.0, 10.0),
        (1.0, 0.0, 1.0, 10.0),
    ],
)
def test_invalid_parameters_raise(args):
    with pytest.raises(ValueError):
        perspective_fov_lh(*args)


def test_create_stores_parameters_and_update_rebuilds():
    p = Projection()
    p.create(1.2, 1.5, 0.5, 50.0)
    built = p.mat
    assert (p.fov_angle, p.aspect_ratio, p.near_z, p.far_z) == (1.2, 1.5, 0.5, 50.0)
    p.far_z = 100.0
    p.update()
    assert p.mat == perspective_fov_lh(1.2, 1.5, 0.5, 100.0)
    assert p.mat != built


def test_update_without_parameters_raises():
    with pytest.raises(ValueError):
        Projection().update()