# geometry/shape.py
import itertools
from typing import List

from core.matrix import IDENTITY, Matrix
from core.ray import Ray
from core.vector import Point, Vector
from materials.material import Material

_shape_ids = itertools.count()


class Shape:
    """
    Abstract class for objects that can be hit by a ray.

    Subclasses describe the shape in its own object space through
    local_intersect() and local_normal_at(); this class maps between world
    and object space using `transform` (object-to-world).

    Shapes compare, hash and order by `id`, which is unique per instance, so
    intersections can refer to the same shape without owning it.
    """
    def __init__(self, transform: Matrix = IDENTITY, material: Material = None):
        self.id = next(_shape_ids)
        self.transform = transform
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix):
        # Raises SingularMatrixError here instead of in the middle of a render.
        inverse = value.inverse()
        self._transform = value
        self._normal_matrix = inverse.transpose()

    def local_intersect(self, ray: Ray) -> List[float]:
        """Returns the t values where a ray given in object space meets the shape."""
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Point) -> Vector:
        """Returns the (possibly unnormalized) normal at a point in object space."""
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def normal_at(self, world_point: Point) -> Vector:
        """
        World-space surface normal at world_point. Normals are mapped back with
        the inverse-transpose of the transform so they stay perpendicular to
        the surface under non-uniform scaling.
        """
        local_point = self._transform.inverse() * world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = self._normal_matrix * local_normal
        return world_normal.normalize()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: "Shape") -> bool:
        return self.id < other.id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
