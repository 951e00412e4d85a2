"""Tests for the path integrator."""

import math
import random

import numpy as np
import pytest

from camera.camera import Camera
from conftest import assert_vec_close
from core.color import BLACK, SKY_BLUE, WHITE
from core.ray import Ray
from core.vector import Vector3
from geometry.scenes import random_scene
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material, Scatter
from materials.metal import Metal
from renderer.raytracer import Renderer, sky_color


class Absorber(Material):
    def scatter(self, ray_in, rec, rng):
        return None


class Poison(Material):
    """Scatters with a NaN attenuation, as degenerate geometry would."""

    def scatter(self, ray_in, rec, rng):
        return Scatter(Ray(rec.p, rec.normal), Vector3(math.nan, 0.0, 0.0))


def small_camera(aspect=2.0):
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90.0, aspect)


class TestSky:
    """Tests for the background gradient."""

    def test_straight_up_is_sky_blue(self):
        assert_vec_close(sky_color(Ray(Vector3(0, 0, 0), Vector3(0, 3, 0))), SKY_BLUE)

    def test_straight_down_is_white(self):
        assert_vec_close(sky_color(Ray(Vector3(0, 0, 0), Vector3(0, -2, 0))), WHITE)

    def test_horizon_is_halfway(self):
        assert_vec_close(sky_color(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))), (0.75, 0.85, 1.0))


class TestRayColor:
    """Tests for recursive radiance evaluation."""

    def test_miss_returns_sky(self, empty_scene, rng):
        renderer = Renderer(1, 1, 1)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, -1))
        assert renderer.ray_color(ray, empty_scene, rng) == sky_color(ray)

    def test_absorbed_returns_black(self, rng):
        scene = Scene([Sphere(Vector3(0, 0, -2), 1.0, Absorber())])
        renderer = Renderer(1, 1, 1)
        assert renderer.ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene, rng) == BLACK

    def test_mirror_attenuates_sky(self, rng):
        albedo = Vector3(0.5, 0.25, 1.0)
        scene = Scene([Sphere(Vector3(0, 0, -2), 1.0, Metal(albedo, 0.0))])
        renderer = Renderer(1, 1, 1)
        # Reflected straight back along +z, which sees the horizon color
        color = renderer.ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene, rng)
        assert_vec_close(color, Vector3(0.75, 0.85, 1.0) * albedo)

    def test_depth_termination(self, facing_mirrors, rng):
        """Facing mirrors stop recursing one bounce past the limit and return black."""
        max_depth = 5
        renderer = Renderer(1, 1, 1, max_depth=max_depth)
        depths = []
        ray_color = renderer.ray_color

        def counting(ray, world, rng, depth=0):
            depths.append(depth)
            return ray_color(ray, world, rng, depth)

        renderer.ray_color = counting
        color = renderer.ray_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), facing_mirrors, rng)
        assert color == BLACK
        assert max(depths) == max_depth + 1
        assert len(depths) == max_depth + 2

    def test_radiance_bounded_by_sky(self):
        rng = random.Random(8)
        scene = random_scene(random.Random(3))
        renderer = Renderer(1, 1, 1, max_depth=10)
        for _ in range(100):
            direction = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 0.2), rng.uniform(-1, 1))
            color = renderer.ray_color(Ray(Vector3(13, 2, 3), direction), scene, rng)
            assert all(0.0 <= c <= 1.0 for c in color)


class TestRenderImage:
    """Tests for full image rendering."""

    def test_shape_and_orientation(self, empty_scene, rng):
        renderer = Renderer(4, 3, 2)
        image = renderer.render_image(small_camera(4 / 3), empty_scene, rng)
        assert image.shape == (3, 4, 3)
        assert np.isfinite(image).all()
        # Top row looks up into the bluer part of the sky
        assert image[0, :, 0].mean() < image[-1, :, 0].mean()

    def test_progress_reports_rows_and_ends_at_one(self, empty_scene, rng):
        fractions = []
        Renderer(2, 4, 1).render_image(small_camera(0.5), empty_scene, rng, fractions.append)
        assert fractions == [0.25, 0.5, 0.75, 1.0]

    def test_fixed_offset_is_deterministic(self):
        scene = Scene([Sphere(Vector3(0, 0, -2), 1.0, Metal(Vector3(0.8, 0.6, 0.2), 0.0))])
        renderer = Renderer(6, 3, 1, jitter=False)
        a = renderer.render_image(small_camera(), scene, random.Random(1))
        b = renderer.render_image(small_camera(), scene, random.Random(2))
        np.testing.assert_array_equal(a, b)

    def test_non_finite_samples_are_discarded(self, rng):
        scene = Scene([Sphere(Vector3(0, 0, -2), 1.0, Poison())])
        renderer = Renderer(3, 3, 2, jitter=False)
        image = renderer.render_image(small_camera(1.0), scene, rng)
        assert np.isfinite(image).all()
        assert renderer.discarded_samples > 0
        # The center pixel sees only the poisoned sphere
        np.testing.assert_array_equal(image[1, 1], [0.0, 0.0, 0.0])
