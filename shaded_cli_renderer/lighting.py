#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/lighting.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import Iterable

from .color import Color
from .math_utils import Vec3

ORIGIN = Vec3(0, 0, 0)


class LightSource:
    """
    Something that lights surfaces.

    Variants implement compute_color(relative_point, normal), where
    relative_point is the surface point minus the light's location and
    normal is the unit surface normal.
    """
    location: Vec3 = ORIGIN

    def compute_color(self, relative_point: Vec3, normal: Vec3) -> Color:
        raise NotImplementedError


class DirectionalLight(LightSource):
    """Parallel light travelling along a fixed direction."""

    def __init__(self, direction: Vec3, color: Color = Color.WHITE, location: Vec3 = ORIGIN):
        self.direction = direction.normalize()
        self.color = color
        self.location = location

    def __repr__(self):
        return f"DirectionalLight({self.direction!r}, {self.color!r})"

    def compute_color(self, relative_point: Vec3, normal: Vec3) -> Color:
        return self.color.scale(max(0.0, -self.direction.dot(normal)))


def accumulate_light(lights: Iterable[LightSource], point: Vec3, normal: Vec3) -> Color:
    """Sum every light's contribution at point, starting from opaque black."""
    total = Color.BLACK
    for light in lights:
        total = total.plus(light.compute_color(point - light.location, normal))
    return total
