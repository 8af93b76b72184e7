# camera/camera.py
import math

from core.matrix import IDENTITY, Matrix
from core.ray import Ray
from core.vector import Point

ORIGIN = Point(0, 0, 0)


class Camera:
    """
    A pinhole camera. The canvas sits one unit in front of the eye (z = -1 in
    camera space); `transform` is the world-to-camera view transform, usually
    built with view_transform().
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Matrix = IDENTITY):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform

        half_view = math.tan(field_of_view / 2)
        self.aspect_ratio = hsize / vsize
        if self.aspect_ratio >= 1:
            self.half_width = half_view
            self.half_height = half_view / self.aspect_ratio
        else:
            self.half_width = half_view * self.aspect_ratio
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix):
        self._inverse = value.inverse()
        self._transform = value
        self._origin = self._inverse * ORIGIN

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Ray from the eye through the center of pixel (px, py)."""
        # Offset from the canvas edge to the pixel's center
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse * Point(world_x, world_y, -1)
        direction = (pixel - self._origin).normalize()
        return Ray(self._origin, direction)

    def __repr__(self) -> str:
        return f"Camera({self.hsize}, {self.vsize}, {self.field_of_view})"
