import pytest

from junglecore.mathutil import lerp
from junglecore.vector import Vector, Vector2D, Vector4


def test_cross_of_axes_gives_third_axis():
    assert Vector.unit_x().cross(Vector.unit_y()) == Vector.unit_z()


def test_cross_is_anticommutative():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 2.0)
    assert a.cross(b) == -(b.cross(a))


def test_cross_is_perpendicular():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)


def test_dot_with_self_is_length_squared():
    a = Vector(1.5, -2.0, 3.0)
    assert a.dot(a) == pytest.approx(a.length_squared())
    assert a.length() ** 2 == pytest.approx(a.length_squared())


def test_distance():
    assert Vector.distance(Vector.zero(), Vector(3.0, 4.0, 0.0)) == pytest.approx(5.0)
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-1.0, 0.0, 7.0)
    assert Vector.distance(a, b) == pytest.approx(Vector.distance(b, a))
    assert Vector.distance(a, a) == 0.0


def test_normalize_in_place():
    v = Vector(3.0, -2.0, 6.0)
    assert v.normalize() is True
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_vector_fails():
    v = Vector.zero()
    assert v.normalize() is False
    assert v.is_zero()


def test_safe_normal_of_zero_is_zero():
    assert Vector.zero().get_safe_normal() == Vector.zero()


def test_safe_normal_of_unit_vector_is_unchanged():
    assert Vector.up().get_safe_normal() == Vector.up()


def test_safe_and_unsafe_normals_agree():
    v = Vector(2.0, 5.0, -1.0)
    assert v.get_safe_normal().equals(v.get_unsafe_normal())
    assert v.get_unsafe_normal().length() == pytest.approx(1.0)


def test_component_min_max():
    a = Vector(1.0, 5.0, -3.0)
    b = Vector(2.0, -1.0, 0.0)
    assert a.component_min(b) == Vector(1.0, -1.0, -3.0)
    assert a.component_max(b) == Vector(2.0, 5.0, 0.0)


def test_nearly_zero_and_zero():
    tiny = Vector(1e-10, -1e-10, 0.0)
    assert tiny.is_nearly_zero()
    assert not tiny.is_zero()
    assert not Vector(0.1, 0.0, 0.0).is_nearly_zero()


def test_equals_uses_tolerance():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(1.00001, 2.0, 3.0)
    assert a.equals(b)
    assert not a.equals(b, 0.0)


def test_all_components_equal():
    assert Vector.splat(2.0).all_components_equal()
    assert not Vector(1.0, 2.0, 1.0).all_components_equal()


def test_arithmetic_round_trips():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(4.0, -5.0, 6.0)
    assert (a + b) - b == a
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0
    assert (a / 2.0) * 2.0 == a
    assert (a * b) / b == a


def test_indexing():
    v = Vector(7.0, 8.0, 9.0)
    assert [v[0], v[1], v[2]] == list(v)
    v[1] = 1.0
    assert v.y == 1.0
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-1] = 0.0


def test_named_directions():
    assert Vector.up() == Vector(0.0, 0.0, 1.0)
    assert Vector.down() == -Vector.up()
    assert Vector.backward() == -Vector.forward()
    assert Vector.left() == -Vector.right()
    assert Vector.one() == Vector.splat(1.0)


def test_named_directions_are_fresh_copies():
    v = Vector.zero()
    v.x = 5.0
    assert Vector.zero().is_zero()


def test_lerp_on_vectors():
    a = Vector(0.0, 0.0, 0.0)
    b = Vector(2.0, 4.0, 6.0)
    assert lerp(a, b, 1.0) == b
    assert lerp(a, b, 0.0) == a


def test_vector2d_operations():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(3.0, -4.0)
    assert (a + b) - b == a
    assert (a * 3.0) / 3.0 == a
    c = Vector2D(1.0, 2.0)
    c += b
    assert c == a + b


def test_vector4_operations():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    b = Vector4(0.5, 0.5, 0.5, 0.5)
    assert (a + b) - b == a
    half = a / 2.0
    assert half + half == a
    assert Vector4() == Vector4(0.0, 0.0, 0.0, 0.0)