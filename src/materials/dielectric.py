# src/materials/dielectric.py
import math
from typing import Optional

from core.vector import Vector


def _snell(comps):
    """Returns (n_ratio, cos_i, sin2_t) for the hit described by comps."""
    n_ratio = comps.n1 / comps.n2
    cos_i = comps.eyev.dot(comps.normalv)
    sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
    return n_ratio, cos_i, sin2_t


def refracted_direction(comps) -> Optional[Vector]:
    """
    Direction of the transmitted ray at a hit, from Snell's law.
    Returns None under total internal reflection.
    """
    n_ratio, cos_i, sin2_t = _snell(comps)
    if sin2_t > 1.0:
        return None
    cos_t = math.sqrt(1.0 - sin2_t)
    return comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio


def schlick(comps) -> float:
    """
    Schlick's approximation of the Fresnel reflectance at a hit.

    Returns the fraction of light reflected, 1.0 under total internal
    reflection. When leaving the denser medium the transmitted angle is used.
    """
    _, cos, sin2_t = _snell(comps)
    if comps.n1 > comps.n2:
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1.0 - r0) * math.pow((1.0 - cos), 5)
