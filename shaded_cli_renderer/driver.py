#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/driver.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import time
from typing import Callable, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class FrameDriver:
    """
    Fixed-cadence frame loop.

    Subclasses implement init() (called once by start()) and update(delta)
    (called per tick with elapsed seconds).  pressed_keys is the live set of
    held key names; pointer_delta accumulates pointer movement and is reset
    to zero after every update.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.pressed_keys: Set[str] = set()
        self.pointer_delta: Tuple[float, float] = (0.0, 0.0)
        self.running = False
        self._last_time: Optional[float] = None

    def init(self):
        raise NotImplementedError

    def update(self, delta: float):
        raise NotImplementedError

    def cleanup(self):
        pass

    def poll_input(self):
        """Hook for subclasses to refresh pressed_keys before each tick."""

    # ── Input state ─────────────────────────────────────────────────────
    def press_key(self, key: str):
        self.pressed_keys.add(key)

    def release_key(self, key: str):
        self.pressed_keys.discard(key)

    def move_pointer(self, dx: float, dy: float):
        px, py = self.pointer_delta
        self.pointer_delta = (px + dx, py + dy)

    # ── Loop ────────────────────────────────────────────────────────────
    def start(self):
        self.init()
        self.running = True
        self._last_time = None

    def tick(self, now: Optional[float] = None) -> Optional[float]:
        """Advance one frame.  The first tick only records the start time."""
        if now is None:
            now = self.clock()
        if self._last_time is None:
            self._last_time = now
            return None
        delta = now - self._last_time
        self._last_time = now
        self.update(delta)
        self.pointer_delta = (0.0, 0.0)
        return delta

    def run(self, frame_time: float = 1 / 30, sleep: Callable[[float], None] = time.sleep):
        """start(), then tick until stop() is called."""
        self.start()
        try:
            while self.running:
                started = self.clock()
                self.poll_input()
                if not self.running:
                    break
                self.tick()
                if not self.running:
                    break
                remaining = frame_time - (self.clock() - started)
                if remaining > 0:
                    sleep(remaining)
        finally:
            if self.running:
                self.stop()

    def stop(self):
        self.running = False
        self.cleanup()
        logger.debug("Frame loop stopped")
