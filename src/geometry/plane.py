# geometry/plane.py
from typing import List

from core.ray import Ray
from core.utils import EPSILON
from core.vector import Point, Vector
from geometry.shape import Shape

UP = Vector(0, 1, 0)


class Plane(Shape):
    """The infinite xz plane (y = 0) in object space."""

    def local_intersect(self, ray: Ray) -> List[float]:
        # Parallel (or coplanar) rays never produce a hit.
        if abs(ray.direction.y) < EPSILON:
            return []
        return [-ray.origin.y / ray.direction.y]

    def local_normal_at(self, point: Point) -> Vector:
        return UP
