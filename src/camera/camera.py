# camera/camera.py
import math
import random
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Look-at camera with a thin lens for depth of field.

    The basis and viewport are computed once at construction; the camera is
    then shared read-only between render workers. With aperture 0 it is a
    pinhole camera and get_ray() needs no randomness.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self._build_basis()

    def _build_basis(self):
        """Computes the orthonormal basis and viewport vectors."""
        theta = math.radians(self.vfov)
        half_height = math.tan(theta / 2)
        half_width = self.aspect_ratio * half_height

        self.origin = self.look_from
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance so the image plane is the focus plane
        self.horizontal = self.u * (2 * half_width * self.focus_dist)
        self.vertical = self.v * (2 * half_height * self.focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng: Optional[random.Random] = None) -> Ray:
        """
        Generates the ray through normalized image coordinates (s, t) in [0, 1]^2,
        with (0, 0) at the lower left corner. rng may be omitted only for a
        pinhole camera.
        """
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)
        if rng is None:
            raise ValueError("A camera with a non-zero aperture needs an rng to sample the lens")

        # Random point on the lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        return Ray(self.origin + offset, target - self.origin - offset)

    def __repr__(self) -> str:
        return (f"Camera(look_from={self.look_from!r}, look_at={self.look_at!r}, "
                f"vfov={self.vfov}, aperture={self.aperture}, focus_dist={self.focus_dist})")
