# geometry/scenes.py
import logging
import math
import random
from typing import Callable, Dict, Optional

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)


def random_scene(rng: Optional[random.Random] = None) -> Scene:
    """
    Large ground sphere, three feature spheres (glass, matte, mirror) and a
    grid of small spheres with randomly chosen materials.
    """
    rng = rng or random.Random()
    world = Scene()

    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))
    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.bronze()))

    # Keep the small spheres clear of the mirror sphere
    clearance_center = Vector3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearance_center).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = ColorPresets.random_matte(rng)
            elif choose_mat < 0.95:
                material = MetalPresets.random(rng)
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    logger.info("Created random scene with %d spheres", len(world))
    return world


def standard_scene() -> Scene:
    """
    Matte, mirror and hollow glass spheres side by side on a large yellow
    ground sphere. The glass shell is an inner sphere of negative radius.
    """
    world = Scene([
        Sphere(Vector3(0, 0, -1), 0.5, Lambertian(ColorPresets.BLUE)),
        Sphere(Vector3(0, -100.5, -1), 100, Lambertian(ColorPresets.YELLOW)),
        Sphere(Vector3(1, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.0)),
        Sphere(Vector3(-1, 0, -1), 0.5, DielectricPresets.glass()),
        Sphere(Vector3(-1, 0, -1), -0.45, DielectricPresets.glass()),
    ])
    logger.info("Created standard scene with %d spheres", len(world))
    return world


def camera_test_scene() -> Scene:
    """Two touching spheres that exactly fill a 90 degree field of view."""
    r = math.cos(math.pi / 4)
    return Scene([
        Sphere(Vector3(-r, 0, -1), r, Lambertian(Vector3(0.1, 0.1, 0.3))),
        Sphere(Vector3(r, 0, -1), r, Lambertian(Vector3(0.3, 0.1, 0.1))),
    ])


def metals_scene() -> Scene:
    """
    A row of named metals and glasses on a matte floor, between a red and a
    green matte sphere.
    """
    world = Scene([
        Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)),
        Sphere(Vector3(-5, 1, 0), 1.0, ColorPresets.matte(ColorPresets.RED)),
        Sphere(Vector3(5, 1, 0), 1.0, ColorPresets.matte(ColorPresets.GREEN)),
    ])
    row = [
        MetalPresets.gold(),
        MetalPresets.silver(),
        MetalPresets.copper(),
        MetalPresets.brushed_metal(),
        DielectricPresets.water(),
        DielectricPresets.diamond(),
    ]
    for i, material in enumerate(row):
        world.add(Sphere(Vector3(-3.125 + 1.25 * i, 0.5, 1.5), 0.5, material))
    logger.info("Created metals scene with %d spheres", len(world))
    return world


# Scene builders by name, each taking the rng used for random layouts
SCENES: Dict[str, Callable[[random.Random], Scene]] = {
    "random": random_scene,
    "standard": lambda rng: standard_scene(),
    "camera-test": lambda rng: camera_test_scene(),
    "metals": lambda rng: metals_scene(),
}
