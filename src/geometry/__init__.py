from geometry.shape import Shape
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.cube import Cube
from geometry.cylinder import Cylinder, TruncatedShape
from geometry.cone import Cone
from geometry.intersection import (
    Computations,
    Intersection,
    hit,
    intersect,
    intersections,
    prepare_computations,
)
from geometry.world import MAX_BOUNCES, World

__all__ = [
    "Shape", "Sphere", "Plane", "Cube", "Cylinder", "Cone", "TruncatedShape",
    "Computations", "Intersection", "hit", "intersect", "intersections",
    "prepare_computations", "World", "MAX_BOUNCES",
]
