# src/geometry/world.py
from typing import Iterable, Iterator, List, Optional
from geometry.hittable import Hittable, HitRecord
from core.ray import Ray

class Scene(Hittable):
    """
    An unordered collection of Hittable objects, intersected by linear scan.
    The scene owns its primitives (and through them their materials). Once a
    render starts it is shared read-only between workers, so it must not be
    modified until the render returns.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Each object is queried with the shrinking range so only closer hits qualify.
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
