import math

import numpy as np
import pytest

import vectorarithmetic as va
from vectorarithmetic import Point, Size, Vector


def random_vectors(num, seed, scale=100.0):
    np.random.seed(seed)
    pairs = np.random.uniform(low=-scale, high=scale, size=(num, 2))
    return [Vector(float(h), float(v)) for h, v in pairs]


def test_magnitude_family():
    v = Vector(3.0, 4.0)
    assert v.length_squared == 25.0
    assert v.magnitude == 5.0
    assert v.length == 5.0
    assert va.magnitude(Size(0.0, 0.0)) == 0.0
    for w in random_vectors(num=50, seed=3):
        assert w.magnitude >= 0.0


def test_normalized_has_unit_length():
    for v in random_vectors(num=50, seed=4):
        assert v.normalized.magnitude == pytest.approx(1.0)
        assert type(v.normalized) is Vector

    n = Point(3.0, 4.0).normalized
    assert n.x == pytest.approx(0.6)
    assert n.y == pytest.approx(0.8)


def test_normalized_zero_is_guarded():
    zero = Point(0.0, 0.0)
    n = zero.normalized
    assert n == zero
    assert n is not zero
    assert not math.isnan(n.x)


def test_reversed():
    v = Size(2.0, -3.0)
    assert v.reversed == Size(-2.0, 3.0)
    assert -v == Size(-2.0, 3.0)
    for w in random_vectors(num=20, seed=5):
        assert w.reversed.reversed == w


def test_dot_product_is_commutative():
    a = Vector(3.0, 4.0)
    b = Vector(-2.0, 5.0)
    assert a.dot_product(b) == 14.0
    assert va.dot_product(Point(1.0, 2.0), Size(3.0, 4.0)) == 11.0
    values = random_vectors(num=40, seed=6)
    for v, w in zip(values[:-1], values[1:]):
        assert va.dot_product(v, w) == pytest.approx(va.dot_product(w, v))


def test_cross_product_uses_angle_difference():
    right = Vector(1.0, 0.0)
    up = Vector(0.0, 1.0)
    assert right.cross_product(up) == pytest.approx(-1.0)
    assert up.cross_product(right) == pytest.approx(1.0)
    assert right.cross_product(right) == pytest.approx(0.0)
    assert right.cross_product(Vector(0.0, 0.0)) == 0.0


def test_cross_product_matches_negated_determinant():
    values = random_vectors(num=40, seed=7)
    for v, w in zip(values[:-1], values[1:]):
        determinant = v.dx * w.dy - v.dy * w.dx
        assert v.cross_product(w) == pytest.approx(-determinant, rel=1e-9, abs=1e-6)


def test_distance_to():
    assert va.distance_to(Point(0.0, 0.0), Point(3.0, 4.0)) == 5.0
    assert Point(3.0, 4.0).distance_to(Vector(0.0, 0.0)) == 5.0
    assert Size(-1.0, -1.0).distance_to(Size(2.0, 3.0)) == 5.0


def test_limited_clamps_length():
    v = Vector(3.0, 4.0)
    clamped = v.limited(2.5)
    assert clamped.magnitude == pytest.approx(2.5)
    assert clamped.dx == pytest.approx(1.5)
    assert clamped.dy == pytest.approx(2.0)

    assert v.limited(5.0) == v
    assert v.limited(10.0) == v

    rng = np.random.default_rng(8)
    for w in random_vectors(num=50, seed=9):
        s = float(rng.uniform(low=0.0, high=150.0))
        r = w.limited(s)
        assert r.magnitude <= s + 1e-9
        if w.magnitude <= s:
            assert r == w


def test_scaled_multiplies_unconditionally():
    # Unlike the clamp of limited(), scaled() always multiplies.
    v = Vector(3.0, 4.0)
    assert v.scaled(2.0) == Vector(6.0, 8.0)
    assert v.scaled(0.5) == Vector(1.5, 2.0)
    assert v.scaled(10.0) != v.limited(10.0)


def test_angle_convention_zero_is_up():
    assert Vector(1.0, 0.0).angle_in_radians == pytest.approx(-math.pi / 2)
    assert Vector(0.0, 1.0).angle_in_radians == pytest.approx(0.0)
    assert Vector(-1.0, 0.0).angle_in_radians == pytest.approx(math.pi / 2)
    assert va.angle_in_radians(Point(0.0, 0.0)) == pytest.approx(-math.pi / 2)


def test_angled_uses_standard_convention():
    v = Vector(3.0, 4.0)
    right = v.angled(0.0)
    assert right.dx == pytest.approx(5.0)
    assert right.dy == pytest.approx(0.0)

    up = va.angled(Point(0.0, 2.0), math.pi / 2)
    assert type(up) is Point
    assert up.x == pytest.approx(0.0, abs=1e-12)
    assert up.y == pytest.approx(2.0)


def test_angle_functions_are_not_inverses():
    v = Vector(0.0, 1.0)
    rebuilt = v.angled(v.angle_in_radians)
    assert rebuilt.is_close(Vector(1.0, 0.0))
    assert not rebuilt.is_close(v)


def test_results_are_new_values():
    v = Vector(3.0, 4.0)
    for result in (v.normalized, v.reversed, v.limited(1.0), v.limited(10.0), v.scaled(1.0)):
        assert result is not v
    assert v == Vector(3.0, 4.0)
