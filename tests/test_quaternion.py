import math

import pytest

from maple_engine.matrix import Matrix
from maple_engine.quaternion import (
    Quaternion,
    angle_between,
    dir_to_dir,
    dot,
    product,
    rotate_around_axis,
    rotate_by,
    safe_acos,
    slerp,
    slerp_steps,
)


def _q(q):
    return (q.x, q.y, q.z, q.w)


def test_default_is_identity():
    assert Quaternion() == Quaternion.identity()
    assert _q(Quaternion.identity()) == (0.0, 0.0, 0.0, 1.0)


def test_from_axis_angle_is_unit():
    q = Quaternion.from_axis_angle((1.0, 2.0, 3.0), 0.7)
    assert q.norm() == pytest.approx(1.0)


def test_conjugated_flips_vector_part():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert _q(q.conjugated()) == (-1.0, -2.0, -3.0, 4.0)


def test_reciprocal_product_is_identity():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert _q(product(q, q.reciprocal())) == pytest.approx((0.0, 0.0, 0.0, 1.0))


def test_normalize_leaves_zero_unchanged():
    q = Quaternion(0.0, 0.0, 0.0, 0.0)
    q.normalize()
    assert _q(q) == (0.0, 0.0, 0.0, 0.0)


def test_to_matrix_matches_z_rotation():
    angle = 0.8
    m = Quaternion.from_axis_angle((0.0, 0.0, 1.0), angle).to_matrix()
    assert tuple(m) == pytest.approx(tuple(Matrix.rotation_z(angle)))


def test_identity_to_matrix():
    assert tuple(Quaternion().to_matrix()) == pytest.approx(tuple(Matrix.identity()))


def test_axis_and_angle_round_trip():
    axis = (0.0, 0.6, 0.8)
    q = Quaternion.from_axis_angle(axis, 1.1)
    assert tuple(q.rotation_axis()) == pytest.approx(axis)
    assert q.angle() == pytest.approx(1.1)


def test_rotation_axis_of_identity_is_z():
    assert tuple(Quaternion().rotation_axis()) == (0.0, 0.0, 1.0)


def test_from_euler_heading_matches_y_axis():
    a = 0.9
    assert _q(Quaternion.from_euler((0.0, a, 0.0))) == pytest.approx(
        _q(Quaternion.from_axis_angle((0.0, 1.0, 0.0), a))
    )


def test_arithmetic_operators():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert _q(-q) == (-1.0, -2.0, -3.0, -4.0)
    assert 2 * q == q * 2
    assert _q(q + q) == _q(q * 2)


def test_dot_with_itself_is_squared_norm():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert dot(q, q) == pytest.approx(q.norm() ** 2)


def test_safe_acos_clamps():
    assert safe_acos(-2.0) == pytest.approx(math.pi)
    assert safe_acos(2.0) == 0.0
    assert safe_acos(0.5) == pytest.approx(math.acos(0.5))


def test_slerp_endpoints():
    a = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 0.4)
    b = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 1.2)
    assert _q(slerp(a, b, 0.0)) == pytest.approx(_q(a))
    assert _q(slerp(a, b, 1.0)) == pytest.approx(_q(b))


def test_slerp_midpoint_halves_angle():
    a = Quaternion.from_axis_angle((1.0, 0.0, 0.0), 0.2)
    b = Quaternion.from_axis_angle((0.0, 1.0, 0.0), 1.0)
    mid = slerp(a, b, 0.5)
    assert angle_between(a, mid) == pytest.approx(angle_between(a, b) / 2)


def test_slerp_equal_returns_start():
    a = Quaternion.from_axis_angle((0.0, 1.0, 0.0), 0.3)
    assert slerp(a, a, 0.7) == a


def test_slerp_steps_endpoints():
    a = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 0.4)
    b = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 1.2)
    assert _q(slerp_steps(a, b, 0, 10)) == pytest.approx(_q(a))
    assert _q(slerp_steps(a, b, 10, 10)) == pytest.approx(_q(b))


def test_rotate_around_axis_quarter_turn():
    result = rotate_around_axis((0.0, 0.0, 1.0), (1.0, 0.0, 0.0), math.pi / 2)
    assert tuple(result) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_rotate_by_keeps_unit_length():
    q = Quaternion.from_axis_angle((1.0, 1.0, 0.0), 0.5)
    assert rotate_by(q, (3.0, 4.0, 5.0)).length() == pytest.approx(1.0)


def test_dir_to_dir_turns_u_into_v():
    u = (1.0, 0.0, 0.0)
    v = (0.0, 3.0, 4.0)
    q = dir_to_dir(u, v)
    assert tuple(rotate_by(q, u)) == pytest.approx((0.0, 0.6, 0.8), abs=1e-9)