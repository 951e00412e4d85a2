# materials/lambertian.py
import random
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, Scatter, check_albedo

class Lambertian(Material):
    """
    Lambertian diffuse material with a solid albedo.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = check_albedo(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Scatter:
        """
        Scatter toward a random point in the unit sphere tangent to the hit point.
        Never absorbs.
        """
        target = rec.p + rec.normal + random_in_unit_sphere(rng)
        return Scatter(Ray(rec.p, target - rec.p), self.albedo)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
