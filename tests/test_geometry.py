import pytest

from recursia.geometry import Point, Rectangle, Vector2D


def test_point_difference_is_vector():
    p1 = Point(7, -2)
    p0 = Point(3, 5)
    v = p1 - p0
    assert isinstance(v, Vector2D)
    assert p0 + v == p1


def test_point_plus_minus_vector_round_trip():
    p = Point(10, 20)
    v = Vector2D(-4, 9)
    assert (p + v) - v == p


def test_vector_plus_point_commutes():
    p = Point(1, 1)
    v = Vector2D(5, 6)
    assert v + p == p + v


def test_vector_addition_and_subtraction_invert():
    a = Vector2D(3, 8)
    b = Vector2D(-1, 4)
    assert (a + b) - b == a
    assert a - a == Vector2D()


def test_negation_is_involution():
    v = Vector2D(2, -9)
    assert -(-v) == v
    assert v + (-v) == Vector2D(0, 0)


def test_scalar_multiplication_truncates_toward_zero():
    assert Vector2D(3, -3) * 0.5 == Vector2D(1, -1)


def test_scalar_multiplication_commutes():
    v = Vector2D(7, 11)
    assert 2.5 * v == v * 2.5


def test_division_matches_reciprocal_multiplication():
    v = Vector2D(100, -50)
    assert v / 4 == v * 0.25


def test_augmented_addition_on_point():
    p = Point(0, 0)
    p += Vector2D(2, 3)
    assert p == Point(2, 3)


def test_point_minus_unsupported_type():
    with pytest.raises(TypeError):
        Point(1, 2) - 3


def test_string_forms():
    assert str(Point(1, 2)) == "{ 1, 2 }"
    assert str(Rectangle(1, 2, 3, 4)) == "{ 1, 2, 3, 4 }"


def test_rectangle_defaults_and_equality():
    assert Rectangle() == Rectangle(0, 0, 0, 0)
    assert Rectangle(1, 2, 3, 4) == Rectangle(1, 2, 3, 4)
    assert Rectangle(1, 2, 3, 4) != Rectangle(1, 2, 3, 5)