#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .errors import (RendererError, MeshLoadError, DegenerateGeometryError,
                     ViewportError, ConfigError)
from .math_utils import Vec3, Vec4, Mat4, to_angle, from_angle
from .color import Color, parse_hex_color
from .geometry import Triangle, Surface, Mesh
from .mesh_loader import parse_mesh, load_mesh
from .lighting import LightSource, DirectionalLight, accumulate_light
from .camera import Camera
from .config import RenderConfig
from .display import DrawingSurface, RecordingSurface, draw_triangle, stroke_triangle
from .canvas import Canvas
from .renderer import Renderer, RenderContext, ProjectedSurface
from .driver import FrameDriver

__version__ = "0.1.0"
