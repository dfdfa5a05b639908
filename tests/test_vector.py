"""Unit tests for Vector3, Ray and the random sampling helpers.

Tests cover:
- Component-wise and scalar arithmetic
- Dot/cross products, length and normalization
- Reflection and refraction
- Unit sphere, unit disk and unit vector sampling
- Ray point evaluation
"""

import math

import pytest

from raytrace.core.ray import Ray
from raytrace.core.utils import (
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    schlick,
)
from raytrace.core.vector import Vector3


class TestVectorArithmetic:
    """Tests for operators."""

    def test_add_sub(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(0.5, -1.0, 4.0)
        assert a + b == Vector3(1.5, 1.0, 7.0)
        assert a - b == Vector3(0.5, 3.0, -1.0)

    def test_scalar_add_sub(self):
        """Scalars apply to every component."""
        v = Vector3(1.0, 2.0, 3.0)
        assert v + 1.0 == Vector3(2.0, 3.0, 4.0)
        assert v - 1 == Vector3(0.0, 1.0, 2.0)

    def test_scale_and_divide(self):
        v = Vector3(1.0, -2.0, 4.0)
        assert v * 2 == Vector3(2.0, -4.0, 8.0)
        assert 2 * v == Vector3(2.0, -4.0, 8.0)
        assert v / 2 == Vector3(0.5, -1.0, 2.0)

    def test_componentwise_multiply(self):
        assert Vector3(1.0, 2.0, 3.0) * Vector3(0.5, 0.5, 2.0) == Vector3(0.5, 1.0, 6.0)

    def test_negate(self):
        assert -Vector3(1.0, -2.0, 0.0) == Vector3(-1.0, 2.0, 0.0)

    def test_in_place_add_rebinds(self):
        """+= produces a new vector and leaves the original untouched."""
        a = Vector3(1.0, 1.0, 1.0)
        alias = a
        a += Vector3(1.0, 0.0, 0.0)
        assert a == Vector3(2.0, 1.0, 1.0)
        assert alias == Vector3(1.0, 1.0, 1.0)

    def test_iteration_and_constructors(self):
        assert tuple(Vector3(1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)
        assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)
        assert Vector3.one() == Vector3(1.0, 1.0, 1.0)

    def test_repr(self):
        assert repr(Vector3(1.0, 2.0, 3.0)) == "Vector3(1.0, 2.0, 3.0)"


class TestVectorProducts:
    """Tests for dot, cross, length and normalization."""

    def test_dot(self):
        assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, -5.0, 6.0)) == 12.0

    def test_cross_of_axes(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
        assert y.cross(x) == Vector3(0.0, 0.0, -1.0)

    def test_length(self):
        v = Vector3(3.0, 4.0, 12.0)
        assert v.length_squared() == 169.0
        assert v.length() == 13.0

    def test_normalize_has_unit_length(self, rng):
        """Any non-zero vector normalizes to magnitude 1."""
        for _ in range(200):
            v = Vector3(*rng.uniform(-100.0, 100.0, size=3))
            assert abs(v.normalize().length() - 1.0) < 1e-9

    def test_normalize_tiny_vector(self):
        v = Vector3(1e-150, 0.0, 0.0)
        assert v.normalize().length() == pytest.approx(1.0, abs=1e-9)

    def test_normalize_zero_vector_is_zero(self):
        assert Vector3(0.0, 0.0, 0.0).normalize() == Vector3(0.0, 0.0, 0.0)


class TestReflectRefract:
    """Tests for reflect() and refract()."""

    def test_reflect(self):
        v = Vector3(1.0, -1.0, 0.0)
        n = Vector3(0.0, 1.0, 0.0)
        assert v.reflect(n) == Vector3(1.0, 1.0, 0.0)

    def test_refract_with_equal_indices_is_straight(self):
        uv = Vector3(1.0, -1.0, 0.0).normalize()
        n = Vector3(0.0, 1.0, 0.0)
        out = uv.refract(n, 1.0)
        assert tuple(out) == pytest.approx(tuple(uv), abs=1e-12)

    def test_refract_bends_toward_normal_entering_denser(self):
        """Snell's law: sin(out) = ratio * sin(in)."""
        uv = Vector3(math.sin(math.radians(30)), -math.cos(math.radians(30)), 0.0)
        n = Vector3(0.0, 1.0, 0.0)
        out = uv.refract(n, 1.0 / 1.5)
        assert out.length() == pytest.approx(1.0, abs=1e-12)
        assert out.x == pytest.approx(0.5 / 1.5, abs=1e-12)
        assert out.y < 0

    def test_schlick_at_normal_incidence(self):
        assert schlick(1.0, 1.5) == pytest.approx(0.04)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)


class TestRandomSampling:
    """Tests for the random samplers."""

    def test_in_unit_sphere(self, rng):
        for _ in range(500):
            assert random_in_unit_sphere(rng).length_squared() <= 1.0

    def test_in_unit_disk(self, rng):
        for _ in range(500):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() <= 1.0

    def test_unit_vector_has_unit_length(self, rng):
        for _ in range(500):
            assert random_unit_vector(rng).length() == pytest.approx(1.0, abs=1e-12)

    def test_unit_vector_is_uniform(self, rng):
        """Mean of many samples is close to the origin."""
        n = 4000
        total = Vector3(0.0, 0.0, 0.0)
        for _ in range(n):
            total = total + random_unit_vector(rng)
        assert (total / n).length() < 0.05


class TestRay:
    """Tests for Ray."""

    def test_at(self):
        ray = Ray(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 2.0, 0.0))
        assert ray.at(0.0) == Vector3(1.0, 0.0, 0.0)
        assert ray.at(1.5) == Vector3(1.0, 3.0, 0.0)

    def test_at_negative_t(self):
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert ray.at(-2.0) == Vector3(0.0, 0.0, 2.0)
