"""Shared fixtures for the ray tracer tests."""

import random

import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.lambertian import Lambertian
from materials.metal import Metal


@pytest.fixture
def rng():
    """A seeded generator so stochastic tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def unit_sphere():
    """Matte unit sphere at the origin."""
    return Sphere(Vector3(0, 0, 0), 1.0, Lambertian(Vector3(0.5, 0.5, 0.5)))


@pytest.fixture
def empty_scene():
    return Scene()


@pytest.fixture
def facing_mirrors():
    """Two perfect mirrors on the z axis that bounce an axial ray forever."""
    mirror = Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.0)
    return Scene([
        Sphere(Vector3(0, 0, -3), 1.0, mirror),
        Sphere(Vector3(0, 0, 3), 1.0, mirror),
    ])


def assert_vec_close(actual, expected, tol=1e-9):
    """Component-wise comparison of two vectors."""
    for a, e in zip(actual, expected):
        assert a == pytest.approx(e, abs=tol), f"{actual!r} != {expected!r}"
