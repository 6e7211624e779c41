#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import Tuple

from .math_utils import Mat4, Vec3, from_angle, to_angle

WORLD_UP = Vec3(0, 1, 0)


class Camera:
    """
    Camera state for the shaded renderer.

    Stores a world-space location and a unit facing direction.  The
    renderer only translates vertices by the location; the direction is
    kept (and convertible to pitch/yaw) but not yet applied as a view
    rotation.
    """
    __slots__ = ('location', 'direction')

    def __init__(self, location: Vec3 = Vec3(0, 0, 0), direction: Vec3 = Vec3(0, 0, 1)):
        self.location = location
        self.direction = direction.normalize()

    def __repr__(self):
        return f"Camera(location={self.location!r}, direction={self.direction!r})"

    def angles(self) -> Tuple[float, float]:
        """Current (pitch, yaw) in radians."""
        return to_angle(self.direction)

    def set_angles(self, pitch: float, yaw: float):
        self.direction = from_angle(pitch, yaw)

    def turn(self, dyaw: float, dpitch: float):
        """Adjust facing by delta angles (radians); pitch stays short of vertical."""
        pitch, yaw = self.angles()
        pitch = max(-1.5, min(1.5, pitch + dpitch))
        self.set_angles(pitch, yaw + dyaw)

    def move(self, forward: float = 0.0, right: float = 0.0, up: float = 0.0):
        """Translate along the horizontal facing, its right-hand side and world up."""
        _pitch, yaw = self.angles()
        ahead = from_angle(0.0, yaw)
        side = WORLD_UP.cross(ahead)
        self.location = self.location + ahead * forward + side * right + WORLD_UP * up

    def to_camera_space(self, v: Vec3) -> Vec3:
        return v - self.location

    def view_matrix(self, up: Vec3 = WORLD_UP) -> Mat4:
        """World -> camera basis.  Not applied by the renderer."""
        return Mat4.look_at_inverse(self.location, self.location + self.direction, up)
