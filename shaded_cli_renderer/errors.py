#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import Optional


class RendererError(Exception):
    """Base class for every error raised by the renderer."""


class MeshLoadError(RendererError):
    """Raised when a mesh description cannot be turned into a Mesh."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class DegenerateGeometryError(RendererError):
    """Zero-length vector or zero-area triangle where a direction is needed."""


class ViewportError(RendererError):
    """Drawing surface reports a width or height that cannot be rendered to."""


class ConfigError(RendererError):
    """Render configuration values that would break the projection."""
