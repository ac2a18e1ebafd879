"""Pytest configuration for intersection tests.

Shared fixtures for the primitive tests. Modules under src/ are importable
through the pythonpath setting in pyproject.toml.
"""

import pytest

from core.ray import Ray
from materials.material import Material


@pytest.fixture
def material():
    """A material distinct from the process-wide default."""
    return Material("test")


@pytest.fixture
def make_ray():
    """Build a Ray from two plain tuples."""

    def _make_ray(origin, direction):
        return Ray(origin, direction)

    return _make_ray
