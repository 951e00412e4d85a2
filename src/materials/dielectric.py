# src/materials/dielectric.py
import random
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material, Scatter

# Clear glass does not absorb light
ATTENUATION = Vector3(1.0, 1.0, 1.0)

class Dielectric(Material):
    def __init__(self, ref_idx: float):
        if not ref_idx > 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Scatter:
        direction = ray_in.direction
        d_dot_n = direction.dot(rec.normal)

        # Leaving the medium when travelling along the normal
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)

        # Total internal reflection always reflects
        if refracted is not None and rng.random() >= schlick(cosine, self.ref_idx):
            return Scatter(Ray(rec.p, refracted), ATTENUATION)

        return Scatter(Ray(rec.p, reflect(direction, rec.normal)), ATTENUATION)

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"
