# renderer/raytracer.py
import logging
import random
from typing import Callable, Optional

import numpy as np

from camera.camera import Camera
from core.color import BLACK, SKY_BLUE, WHITE, Color, lerp
from core.ray import Ray
from geometry.hittable import Hittable
from renderer.config import MAX_DEPTH

logger = logging.getLogger(__name__)

INFINITY = float("inf")
# Minimum hit distance, keeps scattered rays from re-hitting their own surface
T_MIN = 0.001


def sky_color(ray: Ray) -> Color:
    """Vertical white-to-blue gradient standing in for environment light."""
    unit_direction = ray.direction.normalize()
    t = min(max(0.5 * (unit_direction.y + 1.0), 0.0), 1.0)
    return lerp(WHITE, SKY_BLUE, t)


class Renderer:
    """
    Path integrator for a single worker.

    Renders a full image with a fixed number of samples per pixel. Each
    sample follows one camera ray through the scene, scattering off
    materials until it escapes to the sky, is absorbed, or exceeds
    max_depth bounces.
    """

    def __init__(self, width: int, height: int, samples: int,
                 max_depth: int = MAX_DEPTH, jitter: bool = True):
        self.width = width
        self.height = height
        self.samples = samples
        self.max_depth = max_depth
        self.jitter = jitter
        self.discarded_samples = 0

    def ray_color(self, ray: Ray, world: Hittable, rng: random.Random, depth: int = 0) -> Color:
        """
        Estimates the radiance arriving along ray.
        """
        rec = world.hit(ray, T_MIN, INFINITY)
        if rec is None:
            return sky_color(ray)

        if depth > self.max_depth:
            return BLACK

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return BLACK

        # Outgoing radiance is the attenuated incoming radiance, no emission
        return self.ray_color(scattered.ray, world, rng, depth + 1) * scattered.attenuation

    def render_pixel(self, i: int, j: int, camera: Camera, world: Hittable, rng: random.Random) -> Color:
        """
        Averages the samples for pixel column i, row j (row 0 at the bottom).
        Non-finite samples are dropped from the average.
        """
        total = BLACK
        valid = 0
        for _ in range(self.samples):
            if self.jitter:
                du, dv = rng.random(), rng.random()
            else:
                du, dv = 0.5, 0.5
            ray = camera.get_ray((i + du) / self.width, (j + dv) / self.height, rng)
            color = self.ray_color(ray, world, rng)
            if color.is_finite():
                total = total + color
                valid += 1

        self.discarded_samples += self.samples - valid
        if valid == 0:
            return BLACK
        return total / valid

    def render_image(self, camera: Camera, world: Hittable, rng: random.Random,
                     progress: Optional[Callable[[float], None]] = None) -> np.ndarray:
        """
        Renders the full image as a linear float array of shape (height, width, 3).
        Array row 0 is the top of the image. progress, if given, receives the
        completed fraction after every row and always ends with 1.0.
        """
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        self.discarded_samples = 0

        for j in range(self.height):
            row = image[self.height - 1 - j]
            for i in range(self.width):
                color = self.render_pixel(i, j, camera, world, rng)
                row[i] = (color.x, color.y, color.z)
            if progress is not None and j + 1 < self.height:
                progress((j + 1) / self.height)

        if self.discarded_samples:
            logger.debug("Discarded %d non-finite samples", self.discarded_samples)
        if progress is not None:
            progress(1.0)
        return image
