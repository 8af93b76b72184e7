# core/transformations.py
from core.matrix import IDENTITY, Matrix
from core.vector import Point, Vector


def translation(x: float, y: float, z: float) -> Matrix:
    return IDENTITY.translation(x, y, z)


def scaling(x: float, y: float, z: float) -> Matrix:
    return IDENTITY.scaling(x, y, z)


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    return IDENTITY.shearing(xy, xz, yx, yz, zx, zy)


def rotation_x(r: float) -> Matrix:
    return IDENTITY.rotation_x(r)


def rotation_y(r: float) -> Matrix:
    return IDENTITY.rotation_y(r)


def rotation_z(r: float) -> Matrix:
    return IDENTITY.rotation_z(r)


def view_transform(from_point: Point, to: Point, up: Vector) -> Matrix:
    """
    Builds the world-to-camera transform for an eye at from_point looking at
    `to`, with `up` giving the approximate up direction.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)
