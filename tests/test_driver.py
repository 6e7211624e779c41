import pytest

from shaded_cli_renderer.driver import FrameDriver


class FakeClock:
    def __init__(self, step=0.25):
        self.now = 0.0
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


class RecordingDriver(FrameDriver):
    def __init__(self, clock, limit=None):
        super().__init__(clock)
        self.limit = limit
        self.inits = 0
        self.deltas = []
        self.pointers = []
        self.cleaned = False

    def init(self):
        self.inits += 1

    def update(self, delta):
        self.deltas.append(delta)
        self.pointers.append(self.pointer_delta)
        if self.limit is not None and len(self.deltas) >= self.limit:
            self.stop()

    def cleanup(self):
        self.cleaned = True


class TestFrameDriver:
    def test_first_tick_only_records_time(self):
        driver = RecordingDriver(FakeClock())
        driver.start()
        assert driver.tick(now=1.0) is None
        assert driver.tick(now=1.5) == 0.5
        assert driver.deltas == [0.5]
        assert driver.inits == 1

    def test_pointer_reset_after_update(self):
        driver = RecordingDriver(FakeClock())
        driver.start()
        driver.tick(now=0.0)
        driver.move_pointer(3, -1)
        driver.move_pointer(1, 1)
        driver.tick(now=0.1)
        driver.tick(now=0.2)
        assert driver.pointers == [(4, 0), (0.0, 0.0)]
        assert driver.pointer_delta == (0.0, 0.0)

    def test_pressed_keys_live_set(self):
        driver = RecordingDriver(FakeClock())
        driver.press_key('w')
        driver.press_key('a')
        driver.release_key('w')
        driver.release_key('q')
        assert driver.pressed_keys == {'a'}

    def test_run_until_stopped(self):
        sleeps = []
        driver = RecordingDriver(FakeClock(step=0.25), limit=3)
        driver.run(frame_time=1.0, sleep=sleeps.append)
        assert driver.deltas == [0.75, 0.75, 0.75]
        assert driver.cleaned
        assert not driver.running
        assert sleeps == [0.5, 0.5, 0.5]

    def test_stop_on_error(self):
        class Broken(RecordingDriver):
            def update(self, delta):
                raise RuntimeError("boom")

        driver = Broken(FakeClock())
        with pytest.raises(RuntimeError):
            driver.run(frame_time=0, sleep=lambda s: None)
        assert driver.cleaned

    def test_base_hooks_unimplemented(self):
        driver = FrameDriver()
        with pytest.raises(NotImplementedError):
            driver.start()
        with pytest.raises(NotImplementedError):
            driver.update(0.1)
