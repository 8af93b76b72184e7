# materials/material.py
from dataclasses import dataclass, field
from typing import Optional

from core.color import Color
from materials.patterns import Pattern

VACUUM = 1.0


@dataclass
class Material:
    """
    Phong surface parameters plus the reflective/refractive properties used by
    the recursive shading in World.

    Attributes:
        color: Base color, used when no pattern is set
        ambient, diffuse, specular: Phong weights in [0, 1]
        shininess: Specular exponent
        reflective: Mirror weight in [0, 1]; 0 disables reflection rays
        transparency: Transmission weight in [0, 1]; 0 disables refraction rays
        refractive_index: Index of refraction, 1.0 for vacuum
        pattern: Optional pattern overriding `color`
    """
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Optional[Pattern] = None

    def __post_init__(self):
        for name in ("ambient", "diffuse", "specular", "reflective", "transparency"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value}")
        if self.refractive_index <= 0.0:
            raise ValueError(f"refractive_index must be positive, got {self.refractive_index}")

    def color_at(self, shape, point) -> Color:
        """Base color at a world-space point: the pattern if present, else the flat color."""
        if self.pattern is None:
            return self.color
        return self.pattern.pattern_at_shape(shape, point)
