#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/mesh_loader.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

"""
Reader for the line-oriented text mesh format.

    # comment
    v 0 0 0
    v 1 0 0
    v 0 1 0
    f 1 2 3

``v`` appends a vertex, ``f`` builds triangles from 1-based indices of
vertices already seen.  Lines end with ``\\n``, ``\\r`` or ``\\r\\n``.
Faces with more than three indices are fan-triangulated and ``i/t/n``
groups keep only the vertex index.  Any other tag is skipped with a
warning; malformed ``v``/``f`` lines raise MeshLoadError.
"""

import logging
import os
from typing import List, Union

from .errors import MeshLoadError
from .geometry import Mesh, Surface, Triangle
from .math_utils import Vec3

logger = logging.getLogger(__name__)


def _split_lines(text: str) -> List[str]:
    # str.splitlines() would also break on \v, \f and unicode separators
    return text.replace('\r\n', '\n').replace('\r', '\n').split('\n')


def _parse_vertex(fields, lineno) -> Vec3:
    if len(fields) < 3:
        raise MeshLoadError(f"vertex needs 3 coordinates, got {len(fields)}", lineno)
    try:
        x, y, z = (float(f) for f in fields[:3])
    except ValueError:
        raise MeshLoadError(f"bad vertex coordinates {' '.join(fields[:3])!r}", lineno) from None
    return Vec3(x, y, z)


def _parse_face(fields, vertices, lineno) -> List[Triangle]:
    if len(fields) < 3:
        raise MeshLoadError(f"face needs at least 3 indices, got {len(fields)}", lineno)
    points = []
    for field in fields:
        try:
            idx = int(field.split('/')[0])
        except ValueError:
            raise MeshLoadError(f"bad face index {field!r}", lineno) from None
        if idx < 1 or idx > len(vertices):
            raise MeshLoadError(
                f"face index {idx} out of range (1..{len(vertices)})", lineno)
        points.append(vertices[idx - 1])
    return [Triangle(points[0], points[i], points[i + 1])
            for i in range(1, len(points) - 1)]


def parse_mesh(data: Union[bytes, str]) -> Mesh:
    """Parse a mesh description (bytes or text) into a Mesh of white surfaces."""
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode('ascii')
        except UnicodeDecodeError as e:
            raise MeshLoadError(f"mesh data is not ASCII: {e}") from e

    vertices: List[Vec3] = []
    surfaces: List[Surface] = []
    skipped = 0

    for lineno, line in enumerate(_split_lines(data), start=1):
        if not line or line[0] == '#':
            continue
        tag, rest = line[0], line[1:]
        if rest and not rest[0].isspace():
            # a multi-character keyword such as "vn" or "usemtl"
            tag = line.split(None, 1)[0]

        if tag == 'v':
            vertices.append(_parse_vertex(rest.split(), lineno))
        elif tag == 'f':
            for tri in _parse_face(rest.split(), vertices, lineno):
                surfaces.append(Surface(tri))
        elif tag.isspace():
            if line.strip():
                logger.warning("Skipping indented line %d: %r", lineno, line)
                skipped += 1
        else:
            logger.warning("Skipping line %d with unknown tag %r", lineno, tag)
            skipped += 1

    logger.debug("Parsed mesh: %d vertices, %d surfaces, %d lines skipped",
                 len(vertices), len(surfaces), skipped)
    return Mesh(surfaces)


def load_mesh(filename: Union[str, os.PathLike]) -> Mesh:
    """Read and parse a mesh file."""
    try:
        with open(filename, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise MeshLoadError(f"could not read '{filename}': {e}") from e

    try:
        mesh = parse_mesh(data)
    except MeshLoadError as e:
        raise MeshLoadError(f"{filename}: {e.message}", e.line) from e
    logger.info("Loaded '%s': %d surfaces", filename, len(mesh))
    return mesh
