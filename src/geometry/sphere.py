# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but flips the normal inward,
    which is how a hollow glass shell is modelled (an inner sphere of
    negative radius inside a regular one).
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Solves a*t^2 + 2*half_b*t + c = 0
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # Tangent rays count as misses
        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Try the nearer root first, then the farther one
        for root in ((-half_b - sqrt_disc) / a, (-half_b + sqrt_disc) / a):
            if t_min <= root < t_max:
                p = ray.at(root)
                # Dividing by the signed radius flips hollow spheres inward
                normal = (p - self.center) / self.radius
                return HitRecord(root, p, normal, self.material)
        return None

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
