"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from shaded_cli_renderer.camera import Camera
from shaded_cli_renderer.config import RenderConfig
from shaded_cli_renderer.display import RecordingSurface
from shaded_cli_renderer.geometry import Mesh, Triangle
from shaded_cli_renderer.math_utils import Vec3


@pytest.fixture
def unit_triangle():
    return Triangle(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0))


@pytest.fixture
def unit_triangle_mesh(unit_triangle):
    return Mesh.from_triangles([unit_triangle])


@pytest.fixture
def surface_100():
    """100x100 headless drawing surface."""
    return RecordingSurface(100, 100)


@pytest.fixture
def front_config():
    """Projection used by the end-to-end scenario: object pushed to z=5."""
    return RenderConfig(z_near=0.1, z_far=1000.0, fov=90.0, model_offset=5.0)


@pytest.fixture
def origin_camera():
    return Camera(Vec3(0, 0, 0), Vec3(0, 0, 1))
