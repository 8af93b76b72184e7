import pytest

from core.ray import Ray
from core.vector import Point, Vector
from geometry.cube import Cube, check_axis


@pytest.mark.parametrize("origin,direction,t1,t2", [
    (Point(5, 0.5, 0), Vector(-1, 0, 0), 4, 6),
    (Point(-5, 0.5, 0), Vector(1, 0, 0), 4, 6),
    (Point(0.5, 5, 0), Vector(0, -1, 0), 4, 6),
    (Point(0.5, -5, 0), Vector(0, 1, 0), 4, 6),
    (Point(0.5, 0, 5), Vector(0, 0, -1), 4, 6),
    (Point(0.5, 0, -5), Vector(0, 0, 1), 4, 6),
    (Point(0, 0.5, 0), Vector(0, 0, 1), -1, 1),
], ids=["+x", "-x", "+y", "-y", "+z", "-z", "inside"])
def test_ray_hits_cube(origin, direction, t1, t2):
    xs = Cube().local_intersect(Ray(origin, direction))
    assert xs == pytest.approx([t1, t2])


@pytest.mark.parametrize("origin,direction", [
    (Point(-2, 0, 0), Vector(0.2673, 0.5345, 0.8018)),
    (Point(0, -2, 0), Vector(0.8018, 0.2673, 0.5345)),
    (Point(0, 0, -2), Vector(0.5345, 0.8018, 0.2673)),
    (Point(2, 0, 2), Vector(0, 0, -1)),
    (Point(0, 2, 2), Vector(0, -1, 0)),
    (Point(2, 2, 0), Vector(-1, 0, 0)),
])
def test_ray_misses_cube(origin, direction):
    assert Cube().local_intersect(Ray(origin, direction)) == []


def test_parallel_axis_never_produces_nan():
    tmin, tmax = check_axis(0.5, 0.0)
    assert tmin == float("-inf")
    assert tmax == float("inf")

    tmin, tmax = check_axis(2.0, 0.0)
    assert tmin == float("-inf") and tmax == float("-inf")


@pytest.mark.parametrize("point,normal", [
    (Point(1, 0.5, -0.8), Vector(1, 0, 0)),
    (Point(-1, -0.2, 0.9), Vector(-1, 0, 0)),
    (Point(-0.4, 1, -0.1), Vector(0, 1, 0)),
    (Point(0.3, -1, -0.7), Vector(0, -1, 0)),
    (Point(-0.6, 0.3, 1), Vector(0, 0, 1)),
    (Point(0.4, 0.4, -1), Vector(0, 0, -1)),
    (Point(1, 1, 1), Vector(1, 0, 0)),
    (Point(-1, -1, -1), Vector(-1, 0, 0)),
])
def test_cube_normals(point, normal):
    assert Cube().local_normal_at(point) == normal
