#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .color import Color
from .rasterizer import draw_line_dda, fill_triangle


class Canvas:
    """
    Terminal drawing surface at Braille-dot resolution.

    Each terminal cell covers a 2x4 block of pixels.  The grid keeps one
    8-bit dot mask per cell and c_grid the color of the last primitive
    that touched the cell, so later draw calls win (painter's order).
    """
    __slots__ = ['w', 'h', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        self.c_grid = [[None] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    @classmethod
    def for_terminal(cls, rows: int, cols: int) -> 'Canvas':
        """Canvas filling rows x cols terminal cells."""
        return cls(max(0, cols) * 2, max(0, rows) * 4)

    def set_pixel(self, x, y, color):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        cx, cy = x >> 1, y >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color

    def fill_span(self, y, x_start, x_end, color):
        """Set pixels x_start..x_end (inclusive) on row y, already clipped."""
        for x in range(x_start, x_end + 1):
            self.set_pixel(x, y, color)

    def cell(self, row, col):
        """(mask, color) of one terminal cell."""
        return self.grid[row][col], self.c_grid[row][col]

    # ── DrawingSurface ──────────────────────────────────────────────────
    def get_dimensions(self):
        return self.w, self.h

    def fill(self, x1, y1, x2, y2, color: Color):
        """Clear every cell the rectangle touches to an empty mask in color."""
        x_lo, x_hi = sorted((int(x1), int(x2)))
        y_lo, y_hi = sorted((int(y1), int(y2)))
        x_lo, x_hi = max(0, x_lo), min(self.w - 1, x_hi)
        y_lo, y_hi = max(0, y_lo), min(self.h - 1, y_hi)
        if x_lo > x_hi or y_lo > y_hi:
            return
        for cy in range(y_lo >> 2, (y_hi >> 2) + 1):
            for cx in range(x_lo >> 1, (x_hi >> 1) + 1):
                self.grid[cy][cx] = 0
                self.c_grid[cy][cx] = color

    def stroke_line(self, x1, y1, x2, y2, color: Color):
        draw_line_dda(self, (x1, y1), (x2, y2), color)

    def fill_triangle(self, x1, y1, x2, y2, x3, y3, color: Color):
        fill_triangle(self, (x1, y1), (x2, y2), (x3, y3), color)


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
