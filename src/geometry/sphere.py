# geometry/sphere.py
import math
from typing import List

from core.ray import Ray
from core.vector import Point, Vector
from geometry.shape import Shape

ORIGIN = Point(0, 0, 0)


class Sphere(Shape):
    """
    The unit sphere centered at the object-space origin. Use the transform to
    move, size or squash it.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return []

        sqrt_disc = math.sqrt(discriminant)
        return [(-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a)]

    def local_normal_at(self, point: Point) -> Vector:
        return point - ORIGIN
