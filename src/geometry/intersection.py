# geometry/intersection.py
from dataclasses import dataclass
from typing import Iterable, List, Optional

from core.ray import Ray
from core.utils import EPSILON, MACHINE_EPSILON, approx_eq, reflect
from core.vector import Point, Vector
from materials.material import VACUUM


class Intersection:
    """
    A hit at parameter `t` along a ray on `object`. Intersections order by t;
    equality is approximate on t.
    """
    __slots__ = ("t", "object")

    def __init__(self, t: float, obj):
        self.t = t
        self.object = obj

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return approx_eq(self.t, other.t)

    __hash__ = None

    def __lt__(self, other: "Intersection") -> bool:
        return self.t < other.t

    def __repr__(self) -> str:
        return f"Intersection({self.t}, {self.object!r})"


def intersections(*xs: Intersection) -> List[Intersection]:
    """Aggregates intersections into a list sorted by t."""
    return sorted(xs, key=lambda i: i.t)


def intersect(ray: Ray, shape) -> List[Intersection]:
    """
    Intersects a world-space ray with a shape: the ray is moved into object
    space and handed to the shape's local_intersect().
    """
    local_ray = ray.transform(shape.transform.inverse())
    return sorted((Intersection(t, shape) for t in shape.local_intersect(local_ray)),
                  key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """
    The visible intersection: lowest t that is not behind the ray origin,
    or None when every t is negative.
    """
    best = None
    for i in xs:
        if i.t >= -MACHINE_EPSILON and (best is None or i.t < best.t):
            best = i
    return best


@dataclass
class Computations:
    """
    Everything shading needs to know about one hit, precomputed.

    Attributes:
        t: Distance along the ray
        object: The shape that was hit
        point: World-space hit point
        eyev: Vector back towards the eye
        normalv: Surface normal, flipped to face the eye
        inside: True when the ray started inside the shape
        reflectv: The ray direction reflected about normalv
        over_point: point nudged along normalv, origin for shadow and reflection rays
        under_point: point nudged against normalv, origin for refraction rays
        n1: Refractive index of the medium being left
        n2: Refractive index of the medium being entered
    """
    t: float
    object: object
    point: Point
    eyev: Vector
    normalv: Vector
    inside: bool
    reflectv: Vector
    over_point: Point
    under_point: Point
    n1: float = VACUUM
    n2: float = VACUUM


def _refractive_index(containers) -> float:
    return containers[-1].material.refractive_index if containers else VACUUM


def _is_hit(i: Intersection, hit: Intersection) -> bool:
    return i is hit or (i.object is hit.object and approx_eq(i.t, hit.t))


def prepare_computations(hit: Intersection, ray: Ray,
                         xs: Optional[List[Intersection]] = None) -> Computations:
    """
    Builds the Computations for `hit`. `xs` is every intersection along the
    ray; it is needed to work out n1/n2 for nested transparent shapes and
    defaults to just the hit itself.
    """
    if xs is None:
        xs = [hit]

    point = ray.position(hit.t)
    eyev = -ray.direction
    normalv = hit.object.normal_at(point)
    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = -normalv

    # Shapes the ray is currently inside, innermost last.
    containers = []
    n1 = n2 = VACUUM
    for i in sorted(xs, key=lambda i: i.t):
        if _is_hit(i, hit):
            n1 = _refractive_index(containers)

        if i.object in containers:
            containers.remove(i.object)
        else:
            containers.append(i.object)

        if _is_hit(i, hit):
            n2 = _refractive_index(containers)
            break

    return Computations(
        t=hit.t,
        object=hit.object,
        point=point,
        eyev=eyev,
        normalv=normalv,
        inside=inside,
        reflectv=reflect(ray.direction, normalv),
        over_point=point + normalv * EPSILON,
        under_point=point - normalv * EPSILON,
        n1=n1,
        n2=n2,
    )
