import math

import pytest

from junglecore.matrix import Matrix
from junglecore.vector import Vector, Vector4


def _assert_matrix_close(a, b, tol=1e-9):
    for row_a, row_b in zip(a, b):
        assert row_a == pytest.approx(row_b, abs=tol)


SAMPLE = Matrix(
    [
        (2.0, 0.0, 1.0, 0.0),
        (1.0, 3.0, 0.0, 0.0),
        (0.0, 1.0, 4.0, 0.0),
        (5.0, -2.0, 3.0, 1.0),
    ]
)


def test_identity_is_neutral_for_multiplication():
    assert SAMPLE * Matrix.identity() == SAMPLE
    assert Matrix.identity() * SAMPLE == SAMPLE
    assert SAMPLE @ Matrix.identity() == SAMPLE


def test_default_matrix_is_zero():
    assert all(value == 0.0 for row in Matrix() for value in row)


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Matrix([(1.0, 2.0), (3.0, 4.0)])


def test_add_then_subtract_round_trip():
    total = SAMPLE + Matrix.identity()
    assert total - Matrix.identity() == SAMPLE
    assert total[0][0] == SAMPLE[0][0] + 1.0


def test_scalar_multiply_and_divide_round_trip():
    scaled = SAMPLE * 4.0
    assert scaled[3][0] == SAMPLE[3][0] * 4.0
    assert scaled / 4.0 == SAMPLE
    assert 4.0 * SAMPLE == scaled


def test_transpose_twice_is_original():
    t = SAMPLE.transpose()
    assert t[0][1] == SAMPLE[1][0]
    assert t.transpose() == SAMPLE


def test_inverse_times_matrix_is_identity():
    inv = SAMPLE.inverse()
    _assert_matrix_close(inv * SAMPLE, Matrix.identity())
    _assert_matrix_close(SAMPLE * inv, Matrix.identity())


def test_inverse_of_singular_matrix_is_identity():
    singular = Matrix([(1.0, 2.0, 3.0, 4.0)] * 4)
    assert singular.inverse() == Matrix.identity()


def test_inverse_of_non_finite_matrix_is_identity():
    bad = Matrix.identity()
    bad[0][0] = math.inf
    assert bad.inverse() == Matrix.identity()


def test_rotation_is_orthonormal():
    rotation = Matrix.create_rotation(30.0, 45.0, 60.0)
    _assert_matrix_close(rotation * rotation.transpose(), Matrix.identity())


def test_zero_rotation_is_identity():
    _assert_matrix_close(Matrix.create_rotation(0.0, 0.0, 0.0), Matrix.identity())


def test_yaw_quarter_turn_maps_x_to_y():
    rotation = Matrix.create_rotation(0.0, 0.0, 90.0)
    result = rotation.transform_vector(Vector(1.0, 0.0, 0.0))
    assert (result.x, result.y, result.z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-6)


def test_rotation_preserves_length():
    rotation = Matrix.create_rotation(10.0, -20.0, 70.0)
    v = Vector(3.0, -4.0, 12.0)
    assert rotation.transform_vector(v).length() == pytest.approx(v.length())


def test_scale_matrix_scales_position():
    scale = Matrix.create_scale(2.0, 3.0, 4.0)
    assert scale.transform_position(Vector(1.0, 1.0, 1.0)) == Vector(2.0, 3.0, 4.0)


def test_translation_moves_points_not_directions():
    offset = Vector(5.0, -1.0, 2.0)
    translation = Matrix.create_translation(offset)
    point = Vector(1.0, 2.0, 3.0)
    assert translation.transform_position(point) == point + offset
    assert translation.transform_vector(point) == point


def test_transform_vector4_uses_w():
    offset = Vector(5.0, -1.0, 2.0)
    translation = Matrix.create_translation(offset)
    v = Vector4(1.0, 2.0, 3.0, 1.0)
    assert translation.transform_fvector4(v) == Vector4(6.0, 1.0, 5.0, 1.0)
    assert translation.transform_vector(v) == translation.transform_fvector4(v)


def test_transform_position_divides_by_w():
    m = Matrix.identity()
    m[3][3] = 2.0
    assert m.transform_position(Vector(2.0, 4.0, 6.0)) == Vector(1.0, 2.0, 3.0)


def test_transform_position_with_zero_w_keeps_values():
    m = Matrix.identity()
    m[3][3] = 0.0
    assert m.transform_position(Vector(2.0, 4.0, 6.0)) == Vector(2.0, 4.0, 6.0)


def test_identity_returns_fresh_instances():
    a = Matrix.identity()
    a[0][0] = 9.0
    assert Matrix.identity()[0][0] == 1.0