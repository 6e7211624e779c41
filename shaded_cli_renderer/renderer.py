#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .camera import Camera
from .color import Color
from .config import RenderConfig
from .display import draw_triangle
from .errors import ViewportError
from .geometry import Mesh, Surface
from .lighting import DirectionalLight, LightSource, accumulate_light
from .math_utils import Mat4, Vec3, Vec4

logger = logging.getLogger(__name__)

Point2 = Tuple[float, float]


@dataclass
class RenderContext:
    """
    State carried from one frame to the next.

    theta only grows (by each frame's delta); previous_dimensions and
    projection are refreshed together whenever the viewport size changes.
    """
    camera: Camera = field(default_factory=Camera)
    lights: List[LightSource] = field(default_factory=list)
    theta: float = 0.0
    previous_dimensions: Optional[Tuple[float, float]] = None
    projection: Optional[Mat4] = None


@dataclass(frozen=True)
class ProjectedSurface:
    """One emitted draw call: screen points, final color and sort depth."""
    points: Tuple[Point2, Point2, Point2]
    color: Color
    depth: float
    surface: Surface


# ── Pipeline stages ─────────────────────────────────────────────────────

def model_transform(mesh: Mesh, theta: float, offset: float) -> Mesh:
    """Rotate about Z by theta, about X by theta/2, then push +offset along z."""
    rotated_z = mesh.transform(Mat4.rotation_z(theta))
    rotated_zx = rotated_z.transform(Mat4.rotation_x(theta / 2))
    return rotated_zx.translate(Vec3(0, 0, offset))


def is_facing(surface: Surface, camera_location: Vec3) -> bool:
    """Back-face test with the unnormalized normal against camera -> v1."""
    tri = surface.triangle
    return tri.normal().dot(tri.v1 - camera_location) > 0


def cull_back_faces(surfaces: Sequence[Surface], camera_location: Vec3) -> List[Surface]:
    return [s for s in surfaces if is_facing(s, camera_location)]


def sort_by_depth(surfaces: Sequence[Surface]) -> List[Surface]:
    """Farthest first by summed vertex z (painter's order)."""
    return sorted(surfaces, key=lambda s: s.triangle.depth(), reverse=True)


def shade(surfaces: Sequence[Surface], lights: Sequence[LightSource]) -> List[Tuple[Surface, Color]]:
    """Pair each surface with the light accumulated on it.

    Zero-area triangles have no normal and receive no light.
    """
    shaded = []
    for s in surfaces:
        tri = s.triangle
        if tri.normal().length() == 0:
            shaded.append((s, Color.BLACK))
            continue
        shaded.append((s, accumulate_light(lights, tri.v1, tri.unit_normal())))
    return shaded


def project_point(v: Vec3, projection: Mat4, width: float, height: float) -> Point2:
    """Camera-space point -> screen pixels."""
    ndc = projection.mul_vec4(Vec4.from_point(v)).perspective_divide()
    return (ndc.x + 1) / 2 * width, (ndc.y + 1) / 2 * height


# ── Renderer ────────────────────────────────────────────────────────────

class Renderer:
    """
    Per-frame pipeline: transform -> cull -> sort -> light -> project -> emit.

    render_frame() runs every stage to completion and issues draw calls in
    depth-sorted order, so the surface must honor call order for overlaps.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = (config or RenderConfig()).validate()

    def new_context(self, camera: Optional[Camera] = None,
                    lights: Optional[List[LightSource]] = None) -> RenderContext:
        """Context with the configured light when none are given."""
        if lights is None:
            lights = [DirectionalLight(self.config.light_direction, self.config.light_color)]
        return RenderContext(camera=camera or Camera(), lights=list(lights))

    def build_projection(self, width: float, height: float) -> Mat4:
        cfg = self.config
        return Mat4.projection(cfg.z_near, cfg.z_far, cfg.fov, height / width)

    def update_projection(self, context: RenderContext, width: float, height: float):
        dims = (width, height)
        if context.projection is None or context.previous_dimensions != dims:
            logger.debug("Rebuilding projection for %sx%s viewport", width, height)
            context.projection = self.build_projection(width, height)
        context.previous_dimensions = dims

    def render_frame(self, surface, mesh: Mesh, context: RenderContext,
                     delta: float) -> List[ProjectedSurface]:
        """
        Render one frame of mesh onto surface and advance context by delta.

        Raises:
            ViewportError: the surface reports a non-positive width or height.
        """
        width, height = surface.get_dimensions()
        if width <= 0 or height <= 0:
            raise ViewportError(f"cannot render to a {width}x{height} viewport")

        surface.fill(0, 0, width, height, self.config.background)
        self.update_projection(context, width, height)
        context.theta += delta

        world = model_transform(mesh, context.theta, self.config.model_offset)

        camera = context.camera
        candidates = list(world)
        if self.config.use_culling:
            candidates = cull_back_faces(candidates, camera.location)

        ordered = sort_by_depth(candidates)
        lit = shade(ordered, context.lights)

        emitted = []
        for s, light in lit:
            tri = s.triangle.map(camera.to_camera_space)
            points = tuple(project_point(v, context.projection, width, height) for v in tri)
            color = light.apply_to(s.color)
            (x1, y1), (x2, y2), (x3, y3) = points
            draw_triangle(surface, x1, y1, x2, y2, x3, y3, color)
            emitted.append(ProjectedSurface(points, color, s.triangle.depth(), s))
        return emitted
