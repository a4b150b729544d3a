import math

import pytest

from quadplay.geometry import Rect, Vec2, polar_to_cartesian


def test_vector_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(4.0, 0.25)
    assert (a + b) - b == a
    assert -(-a) == a
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2


def test_componentwise_multiplication():
    a = Vec2(2.0, 3.0)
    b = Vec2(5.0, 7.0)
    assert a * b == Vec2(a.x * b.x, a.y * b.y)


def test_iteration_unpacks_components():
    x, y = Vec2(3.0, 9.0)
    assert (x, y) == (3.0, 9.0)


def test_length_matches_dot_product():
    v = Vec2(3.0, 4.0)
    assert v.length() == pytest.approx(math.sqrt(v.dot(v)))
    assert v.length() == pytest.approx(5.0)


def test_normalize_gives_unit_vector_same_direction():
    v = Vec2(-6.0, 2.5)
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vec2(0.0, 0.0).normalize()


def test_dot_of_perpendicular_vectors_is_zero():
    assert Vec2(1.0, 2.0).dot(Vec2(-2.0, 1.0)) == 0.0


def test_rect_edges():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    assert (r.left, r.top) == (1.0, 2.0)
    assert r.right == r.x + r.w
    assert r.bottom == r.y + r.h


def test_rect_overlaps_inclusive_edges():
    a = Rect(0.0, 0.0, 8.0, 8.0)
    touching = Rect(8.0, 0.0, 8.0, 8.0)
    apart = Rect(8.5, 0.0, 8.0, 8.0)
    assert a.overlaps(touching)
    assert touching.overlaps(a)
    assert not a.overlaps(apart)


def test_rect_overlaps_is_symmetric_for_vertical_gap():
    a = Rect(0.0, 0.0, 4.0, 4.0)
    b = Rect(0.0, 10.0, 4.0, 4.0)
    assert a.overlaps(b) is b.overlaps(a) is False


def test_rect_contains_half_open():
    r = Rect(0.0, 0.0, 8.0, 8.0)
    assert r.contains(Vec2(0.0, 0.0))
    assert r.contains(Vec2(7.9, 7.9))
    assert not r.contains(Vec2(8.0, 4.0))
    assert not r.contains(Vec2(4.0, 8.0))
    assert not r.contains(Vec2(-0.1, 4.0))


def test_polar_to_cartesian_zero_angle():
    assert polar_to_cartesian(2.0, 0.0) == Vec2(2.0, 0.0)


@pytest.mark.parametrize("rho,theta", [(1.0, 0.3), (5.0, 2.0), (0.5, -1.2)])
def test_polar_to_cartesian_keeps_radius(rho, theta):
    v = polar_to_cartesian(rho, theta)
    assert v.length() == pytest.approx(rho)
    assert math.atan2(v.y, v.x) == pytest.approx(theta)