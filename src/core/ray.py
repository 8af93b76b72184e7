# core/ray.py
from core.matrix import Matrix
from core.vector import Point, Vector


class Ray:
    """
    A half-line starting at `origin` and running along `direction`.
    The direction is not required to be normalized, so t is measured in
    multiples of the direction's length.
    """
    def __init__(self, origin: Point, direction: Vector):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Point:
        """Point reached after travelling t along the ray."""
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> "Ray":
        """A new ray with both origin and direction mapped by m."""
        return Ray(m * self.origin, m * self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
