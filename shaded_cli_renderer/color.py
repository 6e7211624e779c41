#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """
    Normalized RGBA color.

    Channels are nominally in [0, 1] but are not clamped on construction;
    only plus() clamps.  Alpha defaults to opaque.
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    WHITE: ClassVar['Color']
    BLACK: ClassVar['Color']

    def plus(self, other: 'Color') -> 'Color':
        """Premultiply both by their own alpha, sum, clamp every channel to 1."""
        return Color(
            min(1.0, self.r * self.a + other.r * other.a),
            min(1.0, self.g * self.a + other.g * other.a),
            min(1.0, self.b * self.a + other.b * other.a),
            min(1.0, self.a + other.a),
        )

    def __add__(self, other):
        if isinstance(other, Color):
            return self.plus(other)
        return NotImplemented

    def apply_to(self, surface: 'Color') -> 'Color':
        """Use this color as accumulated light over a surface's own color.

        Light alpha scales intensity; the surface keeps its own alpha.
        """
        return Color(
            self.r * surface.r * self.a,
            self.g * surface.g * self.a,
            self.b * surface.b * self.a,
            surface.a,
        )

    def scale(self, k: float) -> 'Color':
        return Color(self.r * k, self.g * k, self.b * k, self.a)

    def to_rgb255(self) -> Tuple[int, int, int]:
        return tuple(max(0, min(255, int(c * 255.9))) for c in (self.r, self.g, self.b))

    @classmethod
    def from_hex(cls, hex_str: str, alpha: float = 1.0) -> 'Color':
        """'#RRGGBB' or 'RRGGBB' -> Color.  Raises ValueError on bad input."""
        rgb = parse_hex_color(hex_str)
        if rgb is None:
            raise ValueError(f"invalid hex color {hex_str!r}")
        r, g, b = rgb
        return cls(r / 255, g / 255, b / 255, alpha)

    @classmethod
    def from_hex_gray(cls, hex_str: str, alpha: float = 1.0) -> 'Color':
        """Legacy decoding: the first hex byte drives all three channels."""
        val = str(hex_str).strip().lstrip('#')
        level = int(val[0:2], 16) / 255
        return cls(level, level, level, alpha)


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# --- terminal palette matching ---

# The 6x6x6 color cube occupies xterm indices 16-231.
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp: 232-255, values 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color.
    Used on terminals that only support 8 colors."""
    return min(range(8), key=lambda i: (r - _ANSI8[i][0]) ** 2 +
                                       (g - _ANSI8[i][1]) ** 2 +
                                       (b - _ANSI8[i][2]) ** 2)


class ColorPairs:
    """
    Lazily allocates curses color pairs for arbitrary Colors.

    Each Color is reduced to the nearest palette index the terminal offers
    (xterm-256 or ANSI-8) and one pair is created per distinct index, all
    sharing the same background slot.  Call setup() once after
    curses.wrapper init; pair_for() returns 0 when color is unavailable.
    """

    def __init__(self, use_color: bool = True, background: Optional[Color] = None):
        self.use_color = use_color
        self.background = background
        self.num_colors = 0
        self.bg_slot = -1
        self._pairs: Dict[int, int] = {}
        self._next_pair = 1

    def setup(self):
        if not self.use_color:
            return
        try:
            if not curses.has_colors():
                self.use_color = False
                return
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                self.bg_slot = curses.COLOR_BLACK
            self.num_colors = curses.COLORS
        except curses.error as e:
            logger.warning("Terminal colors unavailable: %s", e)
            self.use_color = False
            return

        if self.background is not None and self.background != Color.BLACK:
            self.bg_slot = self.palette_index(self.background)
        logger.debug("Terminal palette: %d colors", self.num_colors)

    def palette_index(self, color: Color) -> int:
        r, g, b = color.to_rgb255()
        if self.num_colors >= 256:
            return rgb_to_nearest_xterm(r, g, b)
        return rgb_to_nearest_ansi8(r, g, b)

    def pair_for(self, color: Optional[Color]) -> int:
        if not self.use_color or color is None:
            return 0
        idx = self.palette_index(color)
        pair = self._pairs.get(idx)
        if pair is not None:
            return pair
        if self._next_pair >= getattr(curses, 'COLOR_PAIRS', 0):
            return 0
        try:
            curses.init_pair(self._next_pair, idx, self.bg_slot)
        except curses.error:
            return 0
        pair = self._pairs[idx] = self._next_pair
        self._next_pair += 1
        return pair

    def background_pair(self) -> int:
        if self.background is None:
            return 0
        return self.pair_for(self.background)
