import math

import pytest

from sampo.vector import Vector2, Vector3


def test_single_value_sets_both_components():
    v = Vector2(2.5)
    assert v == Vector2(2.5, 2.5)


def test_str_format():
    assert str(Vector2(1, 2)) == "{1, 2}"
    assert str(Vector2(0.5, -3)) == "{0.5, -3}"


def test_scalar_operations():
    v = Vector2(2.0, 4.0)
    assert v + 1 == Vector2(3.0, 5.0)
    assert v - 1 == Vector2(1.0, 3.0)
    assert v * 2 == Vector2(4.0, 8.0)
    assert v / 2 == Vector2(1.0, 2.0)


def test_vector_operations_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.5, 4.0)
    assert (a + b) - b == a
    assert (a * b) / b == a


def test_in_place_add():
    v = Vector2(1.0, 2.0)
    same = v
    v += 3.0
    assert same is v
    assert v == Vector2(4.0, 5.0)


def test_inverse_and_negation():
    v = Vector2(1.0, -2.0)
    assert v.inverse() == Vector2(-1.0, 2.0)
    assert -v == v.inverse()
    assert v + v.inverse() == Vector2(0.0)


def test_is_zero():
    assert Vector2(0.0).is_zero()
    assert not Vector2(0.0, 1.0).is_zero()


def test_magnitude():
    assert Vector2(3.0, 4.0).magnitude() == pytest.approx(5.0)
    assert Vector2(-3.0, -4.0).magnitude() == Vector2(3.0, 4.0).magnitude()


def test_normalised_has_unit_length_and_direction():
    v = Vector2(6.0, -8.0)
    n = v.normalised()
    assert n.magnitude() == pytest.approx(1.0)
    assert n * v.magnitude() == Vector2(pytest.approx(6.0), pytest.approx(-8.0))
    assert v == Vector2(6.0, -8.0)


def test_normalised_zero_stays_zero():
    assert Vector2(0.0).normalised() == Vector2(0.0)


def test_normalise_in_place():
    v = Vector2(2.0, 2.0)
    v.normalise()
    assert v.magnitude() == pytest.approx(1.0)
    assert math.isclose(v.x, v.y)
    z = Vector2(0.0)
    z.normalise()
    assert z == Vector2(0.0)


def test_dot_product_is_component_wise():
    a = Vector2(2.0, 3.0)
    b = Vector2(4.0, 5.0)
    assert a.dot_product(b) == a * b


def test_vector3_fields():
    v = Vector3(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)