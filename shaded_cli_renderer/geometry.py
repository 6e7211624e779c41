#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/geometry.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Tuple

from .color import Color
from .math_utils import Mat4, Vec3

VertexFn = Callable[[Vec3], Vec3]


@dataclass(frozen=True)
class Triangle:
    """Three ordered vertices.  Winding decides the normal's direction."""
    v1: Vec3
    v2: Vec3
    v3: Vec3

    def __iter__(self) -> Iterator[Vec3]:
        yield self.v1
        yield self.v2
        yield self.v3

    def normal(self) -> Vec3:
        """(v2 - v1) x (v3 - v1) from the current vertices, unnormalized."""
        return (self.v2 - self.v1).cross(self.v3 - self.v1)

    def unit_normal(self) -> Vec3:
        return self.normal().normalize()

    def depth(self) -> float:
        """Summed z of the vertices; the painter's sort key."""
        return self.v1.z + self.v2.z + self.v3.z

    def map(self, fn: VertexFn) -> 'Triangle':
        return Triangle(fn(self.v1), fn(self.v2), fn(self.v3))

    def transform(self, matrix: Mat4) -> 'Triangle':
        return self.map(matrix.transform_point)


@dataclass(frozen=True)
class Surface:
    """A triangle with its intrinsic color."""
    triangle: Triangle
    color: Color = Color.WHITE

    def map(self, fn: VertexFn) -> 'Surface':
        return Surface(self.triangle.map(fn), self.color)


class Mesh:
    """
    Ordered, immutable collection of surfaces.

    Every transform returns a new Mesh with the surfaces in the same order,
    so a mesh built at start-up can be re-derived from every frame.
    """
    __slots__ = ('surfaces',)

    def __init__(self, surfaces: Iterable[Surface] = ()):
        self.surfaces: Tuple[Surface, ...] = tuple(surfaces)

    def __repr__(self):
        return f"Mesh({len(self.surfaces)} surfaces)"

    def __len__(self):
        return len(self.surfaces)

    def __iter__(self) -> Iterator[Surface]:
        return iter(self.surfaces)

    def __getitem__(self, index) -> Surface:
        return self.surfaces[index]

    def __eq__(self, other):
        if isinstance(other, Mesh):
            return self.surfaces == other.surfaces
        return NotImplemented

    def map_vertices(self, fn: VertexFn) -> 'Mesh':
        return Mesh(s.map(fn) for s in self.surfaces)

    def transform(self, matrix: Mat4) -> 'Mesh':
        return self.map_vertices(matrix.transform_point)

    def translate(self, offset: Vec3) -> 'Mesh':
        return self.map_vertices(lambda v: v + offset)

    def recolor(self, color: Color) -> 'Mesh':
        return Mesh(Surface(s.triangle, color) for s in self.surfaces)

    @classmethod
    def from_triangles(cls, triangles: Iterable[Triangle], color: Color = Color.WHITE) -> 'Mesh':
        return cls(Surface(t, color) for t in triangles)

    @classmethod
    def unit_cube(cls, color: Color = Color.WHITE) -> 'Mesh':
        """Unit cube spanning (0,0,0)-(1,1,1), two triangles per face,
        wound clockwise when seen from outside."""
        v = [Vec3(x, y, z) for z in (0, 1) for y in (0, 1) for x in (0, 1)]
        # v[i]: bit 0 = x, bit 1 = y, bit 2 = z
        faces = [
            (0, 2, 3), (0, 3, 1),  # south (z = 0)
            (1, 3, 7), (1, 7, 5),  # east  (x = 1)
            (5, 7, 6), (5, 6, 4),  # north (z = 1)
            (4, 6, 2), (4, 2, 0),  # west  (x = 0)
            (2, 6, 7), (2, 7, 3),  # top   (y = 1)
            (5, 4, 0), (5, 0, 1),  # bottom (y = 0)
        ]
        return cls.from_triangles((Triangle(v[a], v[b], v[c]) for a, b, c in faces), color)
