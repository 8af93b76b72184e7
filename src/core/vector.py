# core/vector.py
import math

from core.utils import approx_eq


class Tuple:
    """
    A homogeneous 4-component tuple. w == 1 marks a point, w == 0 a vector.
    Arithmetic keeps that distinction: the result of an operation is a Point
    or a Vector whenever its w component says so.
    """
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: "Tuple") -> "Tuple":
        if isinstance(self, Point) and isinstance(other, Point):
            raise TypeError("cannot add a point to a point")
        return make_tuple(self.x + other.x, self.y + other.y,
                          self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if isinstance(self, Vector) and isinstance(other, Point):
            raise TypeError("cannot subtract a point from a vector")
        return make_tuple(self.x - other.x, self.y - other.y,
                          self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return make_tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, t: float) -> "Tuple":
        return make_tuple(self.x * t, self.y * t, self.z * t, self.w * t)

    def __rmul__(self, t: float) -> "Tuple":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Tuple":
        return make_tuple(self.x / t, self.y / t, self.z / t, self.w / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (approx_eq(self.x, other.x) and approx_eq(self.y, other.y)
                and approx_eq(self.z, other.z) and approx_eq(self.w, other.w))

    __hash__ = None

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __repr__(self) -> str:
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


class Point(Tuple):
    __slots__ = ()

    def __init__(self, x: float, y: float, z: float):
        super().__init__(x, y, z, 1.0)

    def __neg__(self):
        raise TypeError("cannot negate a point")

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"


class Vector(Tuple):
    """
    A direction in space, with the usual dot/cross products and normalization.
    """
    __slots__ = ()

    def __init__(self, x: float, y: float, z: float):
        super().__init__(x, y, z, 0.0)

    def dot(self, other: Tuple) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector":
        l = self.magnitude()
        if l == 0:
            return Vector(0, 0, 0)
        return Vector(self.x / l, self.y / l, self.z / l)

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"


def make_tuple(x: float, y: float, z: float, w: float) -> Tuple:
    """Builds the most specific tuple type for the given w component."""
    if w == 1.0:
        return Point(x, y, z)
    if w == 0.0:
        return Vector(x, y, z)
    return Tuple(x, y, z, w)
