# geometry/cylinder.py
import math
from typing import List

from core.matrix import IDENTITY, Matrix
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Point, Vector
from geometry.shape import Shape
from materials.material import Material


class TruncatedShape(Shape):
    """
    Base for shapes of revolution around the y axis that can be cut at
    `minimum` / `maximum` and optionally capped (`closed`).
    Both bounds are exclusive for the side surface.
    """
    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf,
                 closed: bool = False, transform: Matrix = IDENTITY, material: Material = None):
        super().__init__(transform, material)
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def cap_radius_squared(self, y: float) -> float:
        """Squared radius of the shape's cross-section at height y."""
        raise NotImplementedError("cap_radius_squared() must be implemented by subclasses.")

    def side_hits(self, ray: Ray, candidates) -> List[float]:
        """Keeps the candidate t values whose height lies strictly between the bounds."""
        xs = []
        for t in candidates:
            y = ray.origin.y + t * ray.direction.y
            if self.minimum < y < self.maximum:
                xs.append(t)
        return xs

    def _check_cap(self, ray: Ray, t: float, y: float) -> bool:
        x = ray.origin.x + t * ray.direction.x
        z = ray.origin.z + t * ray.direction.z
        return x * x + z * z <= self.cap_radius_squared(y)

    def intersect_caps(self, ray: Ray) -> List[float]:
        xs = []
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return xs

        for bound in (self.minimum, self.maximum):
            # An unbounded end has no cap.
            if math.isinf(bound):
                continue
            t = (bound - ray.origin.y) / ray.direction.y
            if self._check_cap(ray, t, bound):
                xs.append(t)
        return xs

    def cap_normal(self, point: Point):
        """The cap normal if point lies on an end cap, otherwise None."""
        dist = point.x * point.x + point.z * point.z
        if point.y >= self.maximum - EPSILON and dist < self.cap_radius_squared(self.maximum):
            return Vector(0, 1, 0)
        if point.y <= self.minimum + EPSILON and dist < self.cap_radius_squared(self.minimum):
            return Vector(0, -1, 0)
        return None

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(id={self.id}, minimum={self.minimum}, "
                f"maximum={self.maximum}, closed={self.closed})")


class Cylinder(TruncatedShape):
    """Cylinder of radius 1 around the y axis, infinite unless truncated."""

    def cap_radius_squared(self, y: float) -> float:
        return 1.0

    def local_intersect(self, ray: Ray) -> List[float]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x + d.z * d.z

        # Parallel to the axis: only the caps can be hit.
        if abs(a) < EPSILON:
            return self.intersect_caps(ray)

        b = 2.0 * o.x * d.x + 2.0 * o.z * d.z
        c = o.x * o.x + o.z * o.z - 1.0
        disc = b * b - 4.0 * a * c
        if disc < 0:
            return []

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
        return Vector(point.x, 0, point.z)
