"""
Pytest fixtures shared by the ray tracer tests.

`src/` is put on the import path by the pytest configuration in
pyproject.toml, so tests import the packages directly (core, geometry, ...).
"""

import pytest

from geometry.sphere import Sphere
from geometry.world import World
from materials.material import Material


@pytest.fixture
def default_world():
    """Two concentric spheres lit by a white light at (-10, 10, -10)."""
    return World.default()


@pytest.fixture
def glass_sphere():
    """Unit sphere made of fully transparent glass (index 1.5)."""
    return Sphere(material=Material(transparency=1.0, refractive_index=1.5))
