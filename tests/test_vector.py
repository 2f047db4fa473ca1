import math

import pytest

from vector import DivisionByZeroError, Vector2


def test_add_sub_keep_w():
    d = Vector2.direction(1.0, 2.0)
    result = d + Vector2(3.0, 4.0) - Vector2(1.0, 1.0)
    assert (result.x, result.y) == (3.0, 5.0)
    assert result.w == 0.0


def test_scale_uniform_and_per_axis():
    v = Vector2(2.0, -3.0)
    assert v.scale(2) == Vector2(4.0, -6.0)
    assert v.scale(2, 0.5) == Vector2(4.0, -1.5)
    assert 2 * v == v * 2


def test_div_by_zero_raises():
    with pytest.raises(DivisionByZeroError):
        Vector2(1.0, 1.0).div(0)
    with pytest.raises(ZeroDivisionError):
        Vector2(1.0, 1.0) / 0.0


def test_normalize_zero_vector_raises():
    with pytest.raises(DivisionByZeroError):
        Vector2(0.0, 0.0).normalize()


def test_normalize_and_lengths():
    v = Vector2(3.0, 4.0)
    assert v.length() == 5.0
    assert v.squared_length() == 25.0
    unit = v.normalize()
    assert unit.length() == pytest.approx(1.0)
    assert unit.almost_equal(Vector2(0.6, 0.8))


def test_rotate_is_counter_clockwise():
    assert Vector2(1.0, 0.0).rotate(math.pi / 2).almost_equal(Vector2(0.0, 1.0))


def test_rotation_periodicity():
    v = Vector2(1.5, -0.25)
    steps = 360
    rotated = v
    for _ in range(steps):
        rotated = rotated.rotate(2 * math.pi / steps)
    assert rotated.almost_equal(v, 1e-9)
    assert v.rotate(0.7).rotate(-0.7).almost_equal(v)


def test_perpendicular_and_shear():
    assert Vector2(2.0, 3.0).perpendicular() == Vector2(-3.0, 2.0)
    assert Vector2(1.0, 2.0).shear(0.5, 2.0) == Vector2(2.0, 4.0)
    assert -Vector2(1.0, -2.0) == Vector2(-1.0, 2.0)


def test_angle_and_polar_round_trip():
    assert Vector2(-1.0, 0.0).angle() == pytest.approx(math.pi)
    v = Vector2.polar_to_cartesian(2.5, 3.0)
    assert v.length() == pytest.approx(3.0)
    assert v.angle() == pytest.approx(2.5)


def test_unpacks_into_coordinates():
    x, y = Vector2(7.0, 8.0)
    assert (x, y) == (7.0, 8.0)


def test_dot_and_str():
    assert Vector2(1.0, 2.0).dot(Vector2(3.0, -1.0)) == 1.0
    assert str(Vector2(1.0, 2.5)) == "(1.00, 2.50)"
