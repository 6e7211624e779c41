#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/display.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

"""
The drawing surface the renderer emits to.

A surface must provide get_dimensions, fill, stroke_line and
fill_triangle.  stroke_triangle and draw_triangle are optional: the free
functions of the same name use the surface's own method when it has one
and fall back to building the shape from the required calls.
"""

from typing import List, NamedTuple, Protocol, Tuple

from .color import Color


class DrawingSurface(Protocol):
    def get_dimensions(self) -> Tuple[float, float]:
        """Return (width, height) in pixels."""

    def fill(self, x1, y1, x2, y2, color: Color):
        """Fill the rectangle with corners (x1, y1) and (x2, y2)."""

    def stroke_line(self, x1, y1, x2, y2, color: Color):
        ...

    def fill_triangle(self, x1, y1, x2, y2, x3, y3, color: Color):
        ...


def stroke_triangle(surface, x1, y1, x2, y2, x3, y3, color: Color):
    """Outline a triangle: 1-2, 2-3, then 1-3."""
    own = getattr(surface, 'stroke_triangle', None)
    if own is not None:
        own(x1, y1, x2, y2, x3, y3, color)
        return
    surface.stroke_line(x1, y1, x2, y2, color)
    surface.stroke_line(x2, y2, x3, y3, color)
    surface.stroke_line(x1, y1, x3, y3, color)


def draw_triangle(surface, x1, y1, x2, y2, x3, y3, color: Color):
    """Fill a triangle, then stroke its outline in the same color."""
    own = getattr(surface, 'draw_triangle', None)
    if own is not None:
        own(x1, y1, x2, y2, x3, y3, color)
        return
    surface.fill_triangle(x1, y1, x2, y2, x3, y3, color)
    stroke_triangle(surface, x1, y1, x2, y2, x3, y3, color)


class DrawCall(NamedTuple):
    op: str
    coords: Tuple[float, ...]
    color: Color


class RecordingSurface:
    """Headless surface that records every primitive it is asked to draw."""

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.calls: List[DrawCall] = []

    def get_dimensions(self):
        return self.width, self.height

    def resize(self, width: float, height: float):
        self.width = width
        self.height = height

    def fill(self, x1, y1, x2, y2, color):
        self.calls.append(DrawCall('fill', (x1, y1, x2, y2), color))

    def stroke_line(self, x1, y1, x2, y2, color):
        self.calls.append(DrawCall('stroke_line', (x1, y1, x2, y2), color))

    def fill_triangle(self, x1, y1, x2, y2, x3, y3, color):
        self.calls.append(DrawCall('fill_triangle', (x1, y1, x2, y2, x3, y3), color))

    def triangles(self) -> List[DrawCall]:
        return [c for c in self.calls if c.op == 'fill_triangle']

    def clear(self):
        self.calls.clear()
