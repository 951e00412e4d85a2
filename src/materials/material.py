# materials/material.py
import random
from typing import NamedTuple, Optional
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

class Scatter(NamedTuple):
    """A scattered ray and the per-channel attenuation applied to its radiance."""
    ray: Ray
    attenuation: Vector3

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are stateless and shared read-only between render workers;
    all randomness comes from the rng handle passed in.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Scatter]:
        """
        Computes the scattered ray and attenuation.
        Returns a Scatter, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")


def check_albedo(albedo: Vector3) -> Vector3:
    """Rejects albedos that would reflect more light than arrives."""
    if not all(0.0 <= c <= 1.0 for c in albedo):
        raise ValueError(f"Albedo channels must be in [0, 1], got {albedo!r}")
    return albedo
