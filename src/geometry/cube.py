# geometry/cube.py
import math
from typing import List, Tuple

from core.ray import Ray
from core.utils import EPSILON
from core.vector import Point, Vector
from geometry.shape import Shape


def check_axis(origin: float, direction: float) -> Tuple[float, float]:
    """
    Slab test for one axis of the [-1, 1] cube: the t interval during which
    the ray lies between the two planes, ordered (tmin, tmax).
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        # Parallel to the slab: inside it forever, or never.
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """Axis-aligned cube spanning [-1, 1] on every axis in object space."""

    def local_intersect(self, ray: Ray) -> List[float]:
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []
        return [tmin, tmax]

    def local_normal_at(self, point: Point) -> Vector:
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return Vector(point.x, 0, 0)
        elif maxc == ay:
            return Vector(0, point.y, 0)
        return Vector(0, 0, point.z)
