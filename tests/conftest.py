"""Pytest configuration for raytrace tests.

Provides a seeded random generator and the small reference scene shared by
the geometry, material and renderer tests.
"""

import numpy as np
import pytest

from raytrace.scene.builders import simple_scene


@pytest.fixture
def rng():
    """A deterministic random source, fresh for every test."""
    return np.random.default_rng(12345)


@pytest.fixture
def scene():
    """One diffuse sphere on a ground sphere, pinhole camera looking down -z."""
    return simple_scene()


class FixedRandom:
    """Stand-in random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, low=0.0, high=1.0):
        return low + (high - low) * self.value


class NoRandom:
    """Random source that fails the test if anything draws from it."""

    def random(self):
        raise AssertionError("unexpected random draw")

    def uniform(self, low=0.0, high=1.0):
        raise AssertionError("unexpected random draw")


@pytest.fixture
def no_random():
    return NoRandom()


@pytest.fixture
def fixed_random():
    return FixedRandom
