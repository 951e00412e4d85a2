# materials/presets.py
import random
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def bronze() -> Metal:
        # Polished, a perfect mirror
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

    @staticmethod
    def random(rng: random.Random) -> Metal:
        """A pale metal with random tint and roughness."""
        albedo = (Vector3.random(rng) + Vector3(1.0, 1.0, 1.0)) * 0.5
        return Metal(albedo, fuzz=0.5 * rng.random())

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class ColorPresets:
    """Common color presets for materials."""

    RED = Vector3(0.9, 0.2, 0.2)
    BLUE = Vector3(0.1, 0.2, 0.5)
    GREEN = Vector3(0.2, 0.8, 0.2)
    YELLOW = Vector3(0.8, 0.8, 0.0)
    BROWN = Vector3(0.4, 0.2, 0.1)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

    @staticmethod
    def random_matte(rng: random.Random) -> Lambertian:
        """A matte material biased toward darker, saturated colors."""
        return Lambertian(Vector3.random(rng) * Vector3.random(rng))
