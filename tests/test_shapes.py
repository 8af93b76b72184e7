import math

import pytest

from core.matrix import IDENTITY, SingularMatrixError
from core.ray import Ray
from core.transformations import rotation_z, scaling, translation
from core.vector import Point, Vector
from geometry.intersection import intersect
from geometry.plane import Plane
from geometry.shape import Shape
from geometry.sphere import Sphere
from materials.material import Material


class RecordingShape(Shape):
    """Shape that remembers the object-space ray it was asked about."""
    saved_ray = None

    def local_intersect(self, ray):
        self.saved_ray = ray
        return []

    def local_normal_at(self, point):
        return Vector(point.x, point.y, point.z)


def test_shape_defaults():
    s = RecordingShape()
    assert s.transform == IDENTITY
    assert s.material == Material()


def test_shape_ids_are_unique_and_drive_equality():
    a = Sphere()
    b = Sphere()
    assert a != b
    assert a == a
    assert a < b
    assert len({a, b, a}) == 2


def test_singular_transform_rejected_on_assignment():
    s = Sphere()
    with pytest.raises(SingularMatrixError):
        s.transform = scaling(0, 1, 1)
    assert s.transform == IDENTITY


def test_intersect_moves_ray_into_object_space():
    r = Ray(Point(0, 0, -5), Vector(0, 0, 1))

    s = RecordingShape(transform=scaling(2, 2, 2))
    intersect(r, s)
    assert s.saved_ray.origin == Point(0, 0, -2.5)
    assert s.saved_ray.direction == Vector(0, 0, 0.5)

    s.transform = translation(5, 0, 0)
    intersect(r, s)
    assert s.saved_ray.origin == Point(-5, 0, -5)
    assert s.saved_ray.direction == Vector(0, 0, 1)


def test_normal_on_transformed_shape():
    s = RecordingShape(transform=translation(0, 1, 0))
    n = s.normal_at(Point(0, 1.70711, -0.70711))
    assert n == Vector(0, 0.70711, -0.70711)

    s.transform = IDENTITY.rotation_z(math.pi / 5).scaling(1, 0.5, 1)
    n = s.normal_at(Point(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
    assert n == Vector(0, 0.97014, -0.24254)


@pytest.mark.parametrize("origin,expected", [
    (Point(0, 0, -5), [4.0, 6.0]),
    (Point(0, 1, -5), [5.0, 5.0]),
    (Point(0, 2, -5), []),
    (Point(0, 0, 0), [-1.0, 1.0]),
    (Point(0, 0, 5), [-6.0, -4.0]),
])
def test_sphere_intersections(origin, expected):
    xs = intersect(Ray(origin, Vector(0, 0, 1)), Sphere())
    assert [i.t for i in xs] == pytest.approx(expected)


def test_intersections_reference_the_shape():
    s = Sphere()
    xs = intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)), s)
    assert all(i.object is s for i in xs)


def test_transformed_sphere_intersections():
    r = Ray(Point(0, 0, -5), Vector(0, 0, 1))
    xs = intersect(r, Sphere(transform=scaling(2, 2, 2)))
    assert [i.t for i in xs] == pytest.approx([3.0, 7.0])
    assert intersect(r, Sphere(transform=translation(5, 0, 0))) == []


def test_sphere_normals():
    s = Sphere()
    assert s.normal_at(Point(1, 0, 0)) == Vector(1, 0, 0)
    assert s.normal_at(Point(0, 1, 0)) == Vector(0, 1, 0)
    assert s.normal_at(Point(0, 0, 1)) == Vector(0, 0, 1)
    k = math.sqrt(3) / 3
    n = s.normal_at(Point(k, k, k))
    assert n == Vector(k, k, k)
    assert n == n.normalize()


def test_scaled_and_rotated_sphere_normal():
    s = Sphere(transform=scaling(1, 0.5, 1) * rotation_z(math.pi / 5))
    n = s.normal_at(Point(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
    assert n == Vector(0, 0.97014, -0.24254)


def test_plane_normal_is_constant():
    p = Plane()
    for point in (Point(0, 0, 0), Point(10, 0, -10), Point(-5, 0, 150)):
        assert p.local_normal_at(point) == Vector(0, 1, 0)


@pytest.mark.parametrize("origin,direction", [
    (Point(0, 10, 0), Vector(0, 0, 1)),
    (Point(0, 0, 0), Vector(0, 0, 1)),
])
def test_plane_parallel_and_coplanar_rays_miss(origin, direction):
    assert Plane().local_intersect(Ray(origin, direction)) == []


def test_plane_hit_from_above_and_below():
    p = Plane()
    assert p.local_intersect(Ray(Point(0, 1, 0), Vector(0, -1, 0))) == [1.0]
    assert p.local_intersect(Ray(Point(0, -1, 0), Vector(0, 1, 0))) == [1.0]
