# materials/lighting.py
from core.color import BLACK, Color
from core.utils import reflect
from core.vector import Point, Vector
from materials.material import Material


class PointLight:
    """
    A light source with no size, emitting `intensity` from `position`.
    """
    def __init__(self, position: Point, intensity: Color):
        self.position = position
        self.intensity = intensity

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"


def lighting(material: Material, shape, light: PointLight, point: Point,
             eyev: Vector, normalv: Vector, in_shadow: bool = False) -> Color:
    """
    Phong reflection model for a single light.

    Returns ambient + diffuse + specular. Diffuse and specular drop out when
    the point is in shadow or the light is behind the surface. The result is
    not clamped.
    """
    effective_color = material.color_at(shape, point) * light.intensity
    lightv = (light.position - point).normalize()
    ambient = effective_color * material.ambient

    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0 or in_shadow:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
