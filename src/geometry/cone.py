# geometry/cone.py
import math
from typing import List

from core.ray import Ray
from core.utils import EPSILON
from core.vector import Point, Vector
from geometry.cylinder import TruncatedShape


class Cone(TruncatedShape):
    """
    Double-napped cone x^2 + z^2 = y^2 with its apex at the origin; the
    radius at height y is |y|.
    """
    def cap_radius_squared(self, y: float) -> float:
        return y * y

    def local_intersect(self, ray: Ray) -> List[float]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x - d.y * d.y + d.z * d.z
        b = 2.0 * o.x * d.x - 2.0 * o.y * d.y + 2.0 * o.z * d.z
        c = o.x * o.x - o.y * o.y + o.z * o.z

        if abs(a) < EPSILON:
            if abs(b) < EPSILON:
                # Ray runs along the surface through the apex.
                return self.intersect_caps(ray)
            # Parallel to one of the halves: a single hit on the other.
            return self.side_hits(ray, (-c / (2.0 * b),)) + self.intersect_caps(ray)

        disc = b * b - 4.0 * a * c
        if disc < 0:
            return self.intersect_caps(ray)

        sqrt_disc = math.sqrt(disc)
        t0 = (-b - sqrt_disc) / (2.0 * a)
        t1 = (-b + sqrt_disc) / (2.0 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        return self.side_hits(ray, (t0, t1)) + self.intersect_caps(ray)

    def local_normal_at(self, point: Point) -> Vector:
        normal = self.cap_normal(point)
        if normal is not None:
            return normal

        y = math.sqrt(point.x * point.x + point.z * point.z)
        if point.y > 0:
            y = -y
        return Vector(point.x, y, point.z)
