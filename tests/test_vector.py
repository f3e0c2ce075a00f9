import math

import pytest

from toybox.vector import Vector


def test_add_then_subtract_round_trips():
    a = Vector(1.5, -2.0)
    b = Vector(4.0, 8.25)
    assert (a + b) - b == a


def test_magnitude_of_three_four():
    assert Vector(3.0, 4.0).magnitude() == 5.0


def test_direction_is_unit_and_points_at_target():
    start = Vector(1.0, 1.0)
    target = Vector(7.0, 9.0)
    d = start.direction(target)
    assert d.magnitude() == pytest.approx(1.0)
    offset = target - start
    scaled = d * offset.magnitude()
    assert scaled.x == pytest.approx(offset.x)
    assert scaled.y == pytest.approx(offset.y)


def test_dot_product_is_commutative_and_zero_for_perpendicular():
    a = Vector(2.0, 3.0)
    b = Vector(-1.0, 5.0)
    assert a.dot_product(b) == b.dot_product(a)
    assert a.dot_product(Vector(-a.y, a.x)) == 0


def test_angle_with_itself_and_perpendicular():
    v = Vector(3.0, 1.0)
    assert v.angle(v) == pytest.approx(0.0, abs=1e-7)
    assert v.angle(Vector(-v.y, v.x)) == pytest.approx(math.pi / 2)
    assert v.angle(v.inverse()) == pytest.approx(math.pi)


def test_normalize_keeps_direction():
    v = Vector(-6.0, 2.0)
    n = v.normalize()
    assert n.magnitude() == pytest.approx(1.0)
    assert v.angle(n) == pytest.approx(0.0, abs=1e-7)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector().normalize()


def test_inverse_cancels_and_is_involution():
    v = Vector(2.5, -7.0)
    assert v + v.inverse() == Vector()
    assert v.inverse().inverse() == v


def test_scalar_multiplication_both_sides():
    v = Vector(1.25, -3.0)
    assert v * 2 == v + v
    assert 2 * v == v * 2


def test_adding_non_vector_raises_type_error():
    with pytest.raises(TypeError):
        Vector(1.0, 2.0) + 3


def test_vectors_are_mutable():
    v = Vector(1.0, 2.0)
    v.x = 9.0
    assert v == Vector(9.0, 2.0)