#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
import time
from typing import AbstractSet

from .camera import Camera
from .canvas import Canvas, render_cell_ascii, render_cell_braille
from .color import ColorPairs
from .config import RenderConfig
from .driver import FrameDriver
from .errors import MeshLoadError, ViewportError
from .geometry import Mesh
from .mesh_loader import load_mesh
from .renderer import Renderer

logger = logging.getLogger(__name__)

# Key names as reported by key_name()
MOVE_KEYS = {
    'w': (1, 0, 0), 's': (-1, 0, 0),
    'd': (0, 1, 0), 'a': (0, -1, 0),
    'r': (0, 0, 1), 'f': (0, 0, -1),
}
TURN_KEYS = {
    'KEY_LEFT': (-1, 0), 'KEY_RIGHT': (1, 0),
    'KEY_UP': (0, 1), 'KEY_DOWN': (0, -1),
}


def key_name(key: int) -> str:
    """curses key code -> name ('w', 'KEY_UP', ...)."""
    if 32 <= key < 127:
        return chr(key).lower()
    try:
        return curses.keyname(key).decode('ascii', 'replace')
    except ValueError:
        return str(key)


def apply_movement(camera: Camera, keys: AbstractSet[str], delta: float,
                   config: RenderConfig):
    """Movement policy: held keys move and turn the camera for delta seconds."""
    forward = right = up = 0.0
    for key in keys:
        step = MOVE_KEYS.get(key)
        if step:
            forward += step[0]
            right += step[1]
            up += step[2]
    if forward or right or up:
        dist = config.move_speed * delta
        camera.move(forward * dist, right * dist, up * dist)

    dyaw = dpitch = 0.0
    for key in keys:
        turn = TURN_KEYS.get(key)
        if turn:
            dyaw += turn[0]
            dpitch += turn[1]
    if dyaw or dpitch:
        rate = config.turn_speed * delta
        camera.turn(dyaw * rate, dpitch * rate)


def load_model(path) -> Mesh:
    """Mesh from path, or the unit cube when no path is given or loading fails."""
    if not path:
        return Mesh.unit_cube()
    try:
        mesh = load_mesh(path)
    except MeshLoadError as e:
        logger.error("Falling back to demo cube: %s", e)
        return Mesh.unit_cube()
    if not len(mesh):
        logger.warning("'%s' has no faces, using demo cube", path)
        return Mesh.unit_cube()
    return mesh


class DemoApp(FrameDriver):
    """
    Interactive terminal front end: keyboard camera, shaded model, HUD.
    """

    def __init__(self, stdscr, args):
        super().__init__()
        self.stdscr = stdscr
        self.args = args

    def init(self):
        stdscr = self.stdscr
        args = self.args

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)
        stdscr.keypad(True)

        # ── RenderConfig from terminal detection + CLI overrides ────────
        config = RenderConfig.detect_terminal()
        config.fov = args.fov
        config.z_near = args.near
        config.z_far = args.far
        if args.no_color:
            config.use_color = False
        if args.ascii:
            config.use_braille = False
        if args.no_cull:
            config.use_culling = False
        config.background = args.bg_color
        config.light_direction = args.light_dir
        self.config = config

        self.renderer = Renderer(config)
        self.color_pairs = ColorPairs(config.use_color, config.background)
        self.color_pairs.setup()

        self.mesh = load_model(args.model).recolor(args.obj_color)
        self.context = self.renderer.new_context(Camera())

        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()
        self.last_emitted = 0
        logger.info("Demo started: %d surfaces", len(self.mesh))

    # ────────────────────────────────────────────────────────────────────
    # Input: terminals report presses only, so the live set holds the keys
    # seen since the previous tick
    # ────────────────────────────────────────────────────────────────────
    def poll_input(self):
        self.pressed_keys.clear()
        while True:
            try:
                key = self.stdscr.getch()
            except curses.error:
                key = -1
            if key == -1:
                break
            name = key_name(key)
            if name == 'q':
                self.stop()
                return
            if name == 'c':
                self.config.use_culling = not self.config.use_culling
                continue
            if name == 'b':
                self.config.use_braille = not self.config.use_braille
                continue
            self.press_key(name)

    def update(self, delta: float):
        apply_movement(self.context.camera, self.pressed_keys, delta, self.config)

        th, tw = self.stdscr.getmaxyx()
        canvas = Canvas.for_terminal(th - 1, tw - 1)
        start_time = time.time()
        try:
            emitted = self.renderer.render_frame(canvas, self.mesh, self.context, delta)
            self.last_emitted = len(emitted)
        except ViewportError as e:
            logger.warning("Skipping frame: %s", e)
            return

        self.present(canvas)
        self.draw_hud(tw, start_time)
        self.stdscr.refresh()

    def present(self, canvas: Canvas):
        stdscr = self.stdscr
        stdscr.erase()

        bg_pair = self.color_pairs.background_pair()
        if bg_pair:
            try:
                stdscr.bkgd(' ', curses.color_pair(bg_pair))
            except curses.error:
                pass

        render_cell = render_cell_braille if self.config.use_braille else render_cell_ascii
        background = self.config.background
        for y, row in enumerate(canvas.grid[:-1]):
            for x in range(len(row) - 1):
                mask, color = canvas.cell(y, x)
                if not mask or color == background:
                    continue
                attr = curses.color_pair(self.color_pairs.pair_for(color))
                try:
                    stdscr.addstr(y + 1, x, render_cell(mask), attr)
                except curses.error:
                    # writing the bottom-right cell moves the cursor off screen
                    pass

    def draw_hud(self, tw: int, start_time: float):
        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now

        ms = (now - start_time) * 1000
        cam = self.context.camera.location
        hdr = (f" TRI:{len(self.mesh)}"
               f" DRAWN:{self.last_emitted}"
               f" | CAM:{cam.x:.1f},{cam.y:.1f},{cam.z:.1f}"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f" | {'CULL' if self.config.use_culling else 'ALL'} ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(max(0, tw - 1), '=')[:max(0, tw - 1)],
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
