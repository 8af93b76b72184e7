# src/geometry/world.py
from typing import List, Optional

from core.color import BLACK, Color, WHITE
from core.ray import Ray
from core.transformations import scaling
from core.vector import Point
from geometry.intersection import Computations, Intersection, hit, intersect, prepare_computations
from geometry.shape import Shape
from geometry.sphere import Sphere
from materials.dielectric import refracted_direction, schlick
from materials.lighting import PointLight, lighting
from materials.material import Material

# Default recursion limit for reflection and refraction rays.
MAX_BOUNCES = 4


class World:
    """
    The scene: a list of shapes and the point lights that illuminate them.

    The world must not be modified while a render is in progress; every
    query below only reads from it.
    """
    def __init__(self, objects: Optional[List[Shape]] = None,
                 lights: Optional[List[PointLight]] = None):
        self.objects: List[Shape] = list(objects) if objects else []
        self.lights: List[PointLight] = list(lights) if lights else []

    @classmethod
    def default(cls) -> "World":
        """Two concentric spheres lit from the upper left, front."""
        light = PointLight(Point(-10, 10, -10), WHITE)
        outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
        return cls([outer, inner], [light])

    def add(self, obj: Shape):
        self.objects.append(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def clear(self):
        self.objects.clear()
        self.lights.clear()

    def intersect(self, ray: Ray) -> List[Intersection]:
        xs = []
        for obj in self.objects:
            xs.extend(intersect(ray, obj))
        xs.sort(key=lambda i: i.t)
        return xs

    def is_shadowed(self, light: PointLight, point: Point) -> bool:
        """
        True when an opaque shape sits between point and the light.
        Transparent shapes never cast shadows.
        """
        v = light.position - point
        distance = v.magnitude()
        ray = Ray(point, v.normalize())

        blockers = [i for i in self.intersect(ray) if i.object.material.transparency == 0]
        h = hit(blockers)
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computations, remaining: int = MAX_BOUNCES) -> Color:
        material = comps.object.material

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)
        if material.reflective > 0 and material.transparency > 0:
            reflectance = schlick(comps)
            secondary = reflected * reflectance + refracted * (1.0 - reflectance)
        else:
            secondary = reflected + refracted

        # Each light contributes its own surface shading plus the secondary rays.
        color = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(light, comps.over_point)
            color = color + lighting(material, comps.object, light, comps.over_point,
                                     comps.eyev, comps.normalv, shadowed) + secondary
        return color

    def color_at(self, ray: Ray, remaining: int = MAX_BOUNCES) -> Color:
        """
        Color seen along ray. The background is black. `remaining` bounds how
        many more reflection/refraction rays may be spawned from here.
        """
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return BLACK
        return self.shade_hit(prepare_computations(h, ray, xs), remaining)

    def reflected_color(self, comps: Computations, remaining: int = MAX_BOUNCES) -> Color:
        reflective = comps.object.material.reflective
        if reflective == 0 or remaining <= 0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_BOUNCES) -> Color:
        transparency = comps.object.material.transparency
        if transparency == 0 or remaining <= 0:
            return BLACK

        direction = refracted_direction(comps)
        if direction is None:
            # Total internal reflection
            return BLACK

        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency
