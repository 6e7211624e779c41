#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math


def _finite(*points):
    return all(math.isfinite(c) for p in points for c in p)


def _edge_x(xa, ya, xb, yb, y):
    if yb == ya:
        return xa
    return xa + (xb - xa) * (y - ya) / (yb - ya)


def fill_triangle(canvas, p1, p2, p3, color):
    """
    Scanline-fills a triangle onto the canvas.
    p1, p2, p3 are (x, y) screen-space tuples; only rows and columns
    inside the canvas are visited, and non-finite points draw nothing.
    """
    if not _finite(p1, p2, p3):
        return

    # Sort vertices by Y
    if p1[1] > p2[1]: p1, p2 = p2, p1
    if p1[1] > p3[1]: p1, p3 = p3, p1
    if p2[1] > p3[1]: p2, p3 = p3, p2

    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    x3, y3 = p3[0], p3[1]

    w, h = canvas.w, canvas.h
    y_start = max(0, math.ceil(y1))
    y_end = min(h - 1, math.floor(y3))

    for y in range(y_start, y_end + 1):
        xa = _edge_x(x1, y1, x3, y3, y)  # long edge
        if y < y2:
            xb = _edge_x(x1, y1, x2, y2, y)
        else:
            xb = _edge_x(x2, y2, x3, y3, y)
        if xa > xb:
            xa, xb = xb, xa
        start_x = max(0, math.ceil(xa))
        end_x = min(w - 1, math.floor(xb))
        if start_x <= end_x:
            canvas.fill_span(y, start_x, end_x, color)


def _clip_line(x1, y1, x2, y2, x_max, y_max):
    """Liang-Barsky clip to [0, x_max] x [0, y_max]; None when outside."""
    dx, dy = x2 - x1, y2 - y1
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1), (dx, x_max - x1), (-dy, y1), (dy, y_max - y1)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1: return None
            if t > t0: t0 = t
        else:
            if t < t0: return None
            if t < t1: t1 = t
    return x1 + t0 * dx, y1 + t0 * dy, x1 + t1 * dx, y1 + t1 * dy


def draw_line_dda(canvas, p1, p2, color):
    """
    Draws a line using the DDA algorithm, clipped to the canvas.
    """
    if not _finite(p1, p2) or canvas.w <= 0 or canvas.h <= 0:
        return
    clipped = _clip_line(p1[0], p1[1], p2[0], p2[1], canvas.w - 1, canvas.h - 1)
    if clipped is None:
        return
    x1, y1, x2, y2 = (int(round(c)) for c in clipped)

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1, color)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)), color)
        cx += x_inc; cy += y_inc
