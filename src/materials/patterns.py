# materials/patterns.py
import math

from core.color import Color
from core.matrix import IDENTITY, Matrix
from core.vector import Point


class Pattern:
    """
    Base class for all patterns. A pattern is a pure function of a point in
    pattern space; pattern_at_shape() handles the trip from world space.
    """
    def __init__(self, a: Color, b: Color, transform: Matrix = IDENTITY):
        self.a = a
        self.b = b
        self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix):
        # Fail on a singular transform now rather than mid-render.
        value.inverse()
        self._transform = value

    def pattern_at(self, point: Point) -> Color:
        """Sample the pattern at a point given in pattern space."""
        raise NotImplementedError("pattern_at() must be implemented by pattern subclasses.")

    def pattern_at_shape(self, shape, world_point: Point) -> Color:
        object_point = shape.transform.inverse() * world_point
        pattern_point = self.transform.inverse() * object_point
        return self.pattern_at(pattern_point)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.a!r}, {self.b!r})"


class StripePattern(Pattern):
    """Alternates between a and b every unit along x."""
    def pattern_at(self, point: Point) -> Color:
        return self.a if math.floor(point.x) % 2 == 0 else self.b


class GradientPattern(Pattern):
    """Blends linearly from a to b across each unit along x."""
    def pattern_at(self, point: Point) -> Color:
        fraction = point.x - math.floor(point.x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(Pattern):
    """Concentric rings around the y axis."""
    def pattern_at(self, point: Point) -> Color:
        return self.a if math.floor(math.hypot(point.x, point.z)) % 2 == 0 else self.b


class CheckerPattern(Pattern):
    """A 3D checker of unit cubes."""
    def pattern_at(self, point: Point) -> Color:
        total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        return self.a if total % 2 == 0 else self.b
