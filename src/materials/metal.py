# materials/metal.py
import random
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, Scatter, check_albedo

class Metal(Material):
    """
    Metal material with reflective properties. fuzz is clamped to [0, 1].
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = check_albedo(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Scatter]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected
        if self.fuzz > 0:
            direction = reflected + random_in_unit_sphere(rng) * self.fuzz

        if direction.dot(rec.normal) > 0:
            return Scatter(Ray(rec.p, direction), self.albedo)

        return None  # Absorb rays that would head into the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
