#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import os
from dataclasses import dataclass, field

from .color import Color
from .errors import ConfigError
from .math_utils import Vec3

LOG_LEVEL = os.environ.get('SHADED_LOG_LEVEL', 'WARNING')
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    z_near: float = 0.1
    z_far: float = 1000.0
    fov: float = 90.0
    # Distance the model is pushed along +z in front of the camera
    model_offset: float = 3.0
    use_culling: bool = True
    background: Color = Color.BLACK
    light_direction: Vec3 = field(default_factory=lambda: Vec3(0, 0, -1))
    light_color: Color = Color.WHITE
    use_color: bool = True
    use_braille: bool = True
    move_speed: float = 2.0   # world units per second
    turn_speed: float = 1.5   # radians per second

    def validate(self) -> 'RenderConfig':
        """Raise ConfigError for values that would break the projection."""
        if self.z_near == self.z_far:
            raise ConfigError(f"z_near and z_far must differ (both {self.z_near})")
        if not 0 < self.fov < 180:
            raise ConfigError(f"fov must be in (0, 180) degrees, got {self.fov}")
        if self.light_direction.length() == 0:
            raise ConfigError("light_direction must be non-zero")
        return self

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Note: accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
