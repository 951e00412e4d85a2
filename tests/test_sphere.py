"""Unit tests for ray-sphere intersection.

Tests cover:
- Ray hitting sphere from outside
- Ray missing sphere and tangent rays
- Ray starting inside sphere
- Range limits and non-unit directions
- Negative radius (hollow) spheres
"""

import math

import pytest

from conftest import assert_vec_close
from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere
from materials.lambertian import Lambertian

INF = math.inf


class TestSphereIntersection:
    """Tests for Sphere.hit."""

    def test_direct_hit(self, unit_sphere):
        """Ray from z=5 toward the origin hits the front at t=4."""
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec = unit_sphere.hit(ray, 0.001, INF)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert_vec_close(rec.p, (0, 0, 1))
        assert_vec_close(rec.normal, (0, 0, 1))
        assert rec.material is unit_sphere.material
        assert ray.direction.dot(rec.normal) < 0

    def test_miss(self, unit_sphere):
        ray = Ray(Vector3(5, 0, 0), Vector3(0, 0, -1))
        assert unit_sphere.hit(ray, 0.001, INF) is None

    def test_tangent_ray_is_a_miss(self, unit_sphere):
        ray = Ray(Vector3(1, 0, 5), Vector3(0, 0, -1))
        assert unit_sphere.hit(ray, 0.001, INF) is None

    def test_ray_from_inside_hits_far_side(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
        rec = unit_sphere.hit(ray, 0.001, INF)
        assert rec.t == pytest.approx(1.0)
        # Normal stays outward, so the ray travels along it
        assert_vec_close(rec.normal, (0, 0, 1))
        assert ray.direction.dot(rec.normal) > 0

    def test_sphere_behind_ray(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert unit_sphere.hit(ray, 0.001, INF) is None

    def test_range_upper_bound_excludes_hit(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert unit_sphere.hit(ray, 0.001, 3.0) is None

    def test_range_falls_through_to_far_root(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec = unit_sphere.hit(ray, 4.5, INF)
        assert rec.t == pytest.approx(6.0)
        assert_vec_close(rec.normal, (0, 0, -1))

    def test_range_is_half_open(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert unit_sphere.hit(ray, 4.0, INF).t == pytest.approx(4.0)
        assert unit_sphere.hit(ray, 0.0, 4.0) is None

    def test_non_unit_direction(self, unit_sphere):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -2))
        rec = unit_sphere.hit(ray, 0.001, INF)
        assert rec.t == pytest.approx(2.0)
        assert_vec_close(rec.p, (0, 0, 1))
        assert rec.normal.length() == pytest.approx(1.0)

    def test_normal_is_unit_length(self):
        sphere = Sphere(Vector3(1, 2, 3), 2.5, Lambertian(Vector3(1, 1, 1)))
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 2, 3))
        rec = sphere.hit(ray, 0.001, INF)
        assert rec.normal.length() == pytest.approx(1.0)


class TestHollowSphere:
    """Tests for spheres with negative radius."""

    def test_negative_radius_flips_normal_inward(self):
        shell = Sphere(Vector3(0, 0, 0), -1.0, Lambertian(Vector3(1, 1, 1)))
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec = shell.hit(ray, 0.001, INF)
        assert rec.t == pytest.approx(4.0)
        assert_vec_close(rec.normal, (0, 0, -1))
