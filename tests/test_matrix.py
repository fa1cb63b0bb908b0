import math

import pytest

from maple_engine.matrix import Matrix, transform, translation_of
from maple_engine.vector3d import Vector3D


def _approx(m):
    return pytest.approx(list(m), abs=1e-9)


SAMPLE = Matrix.from_rows([
    (2.0, 0.0, 1.0, 0.0),
    (0.0, 3.0, 0.0, 1.0),
    (1.0, 0.0, 4.0, 0.0),
    (0.0, 1.0, 0.0, 5.0),
])


def test_default_is_identity():
    assert Matrix() == Matrix.identity()
    assert Matrix.identity()[0] == 1.0
    assert Matrix.identity()[1] == 0.0
    assert Matrix.identity()[15] == 1.0


def test_wrong_value_count_raises():
    with pytest.raises(ValueError):
        Matrix([1.0, 2.0, 3.0])


def test_from_rows_rejects_bad_shape():
    with pytest.raises(ValueError):
        Matrix.from_rows([(1, 2, 3, 4)] * 3)


def test_rows_round_trip():
    assert Matrix.from_rows(SAMPLE.rows()) == SAMPLE


def test_translation_layout():
    m = Matrix.translation(4.0, 5.0, 6.0)
    assert (m[12], m[13], m[14], m[15]) == (4.0, 5.0, 6.0, 1.0)
    assert translation_of(m) == Vector3D(4.0, 5.0, 6.0)


def test_scaling_diagonal():
    m = Matrix.scaling(2.0, 3.0, 4.0)
    assert (m[0], m[5], m[10], m[15]) == (2.0, 3.0, 4.0, 1.0)


@pytest.mark.parametrize("index", [-1, 16, 100])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        Matrix.identity()[index]


def test_iteration_matches_indexing():
    assert list(SAMPLE) == [SAMPLE[i] for i in range(16)]


def test_identity_is_neutral():
    assert SAMPLE * Matrix.identity() == SAMPLE
    assert Matrix.identity() * SAMPLE == SAMPLE


def test_transpose_twice_is_original():
    assert SAMPLE.transposed().transposed() == SAMPLE
    assert SAMPLE.transposed().rows()[0][2] == SAMPLE.rows()[2][0]


def test_inverse_of_translation_moves_back():
    m = Matrix.translation(4.0, 5.0, 6.0)
    assert list(m.inverse()) == _approx(Matrix.translation(-4.0, -5.0, -6.0))


def test_singular_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix([0.0] * 16).inverse()


def test_scalar_mul_and_div_round_trip():
    assert list((SAMPLE * 3.0) / 3.0) == _approx(SAMPLE)
    assert 2.0 * SAMPLE == SAMPLE * 2.0


def test_add_sub_round_trip():
    other = Matrix.translation(1.0, 2.0, 3.0)
    assert (SAMPLE + other) - other == SAMPLE
    assert list(SAMPLE - SAMPLE) == [0.0] * 16


def test_rotation_x_quarter_turn():
    m = Matrix.rotation_x(math.pi / 2)
    assert m[5] == pytest.approx(0.0, abs=1e-12)
    assert m[6] == pytest.approx(1.0)
    assert m[9] == pytest.approx(-1.0)


def test_rotations_compose_to_identity():
    for make in (Matrix.rotation_x, Matrix.rotation_y, Matrix.rotation_z):
        assert list(make(0.7) * make(-0.7)) == _approx(Matrix.identity())


def test_rotation_y_layout():
    m = Matrix.rotation_y(0.3)
    assert m[2] == pytest.approx(math.sin(0.3))
    assert m[8] == pytest.approx(-math.sin(0.3))


def test_rotation_axis_zero_angle_is_identity():
    assert list(Matrix.rotation_axis(0.0, (0.0, 1.0, 0.0))) == _approx(Matrix.identity())


def test_rotation_axis_around_z_matches_rotation_z():
    angle = 0.4
    assert list(Matrix.rotation_axis(angle, (0.0, 0.0, 1.0))) == _approx(
        Matrix.rotation_z(-angle)
    )


def test_transform_by_translation():
    point = Vector3D(1.0, 2.0, 3.0)
    offset = Vector3D(4.0, 5.0, 6.0)
    result = transform(point, Matrix.translation(*offset))
    assert list(result) == pytest.approx(list(point + offset))


def test_transform_divides_by_w():
    point = Vector3D(1.0, 2.0, 3.0)
    result = transform(point, Matrix.identity() * 2.0)
    assert list(result) == pytest.approx(list(point))


def test_transform_then_inverse_round_trip():
    point = Vector3D(0.5, -1.5, 2.0)
    moved = transform(point, SAMPLE)
    back = transform(moved, SAMPLE.inverse())
    assert list(back) == pytest.approx(list(point))