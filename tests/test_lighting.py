import math

import pytest

from shaded_cli_renderer.color import Color
from shaded_cli_renderer.errors import DegenerateGeometryError
from shaded_cli_renderer.lighting import DirectionalLight, LightSource, accumulate_light
from shaded_cli_renderer.math_utils import Vec3

ORIGIN = Vec3(0, 0, 0)
RED = Color(1.0, 0.2, 0.0)


class TestDirectionalLight:
    def test_facing_gives_full_color(self):
        normal = Vec3(0, 0, -1)
        light = DirectionalLight(-normal, RED)
        assert light.compute_color(ORIGIN, normal) == RED

    def test_facing_away_gives_black(self):
        normal = Vec3(0, 1, 0)
        light = DirectionalLight(normal, RED)
        lit = light.compute_color(ORIGIN, normal)
        assert (lit.r, lit.g, lit.b) == (0.0, 0.0, 0.0)

    def test_oblique(self):
        light = DirectionalLight(Vec3(1, 0, -1), Color.WHITE)
        lit = light.compute_color(ORIGIN, Vec3(0, 0, 1))
        assert lit.r == pytest.approx(math.sqrt(0.5))

    def test_direction_normalized(self):
        light = DirectionalLight(Vec3(0, 0, -10))
        assert light.direction == Vec3(0, 0, -1)

    def test_point_does_not_matter(self):
        light = DirectionalLight(Vec3(0, -1, 0))
        normal = Vec3(0, 1, 0)
        assert light.compute_color(Vec3(5, 5, 5), normal) == light.compute_color(ORIGIN, normal)

    def test_zero_direction_rejected(self):
        with pytest.raises(DegenerateGeometryError):
            DirectionalLight(Vec3(0, 0, 0))


def test_base_light_is_abstract():
    with pytest.raises(NotImplementedError):
        LightSource().compute_color(ORIGIN, Vec3(0, 0, 1))


class TestAccumulate:
    def test_no_lights_is_black(self):
        assert accumulate_light([], ORIGIN, Vec3(0, 0, 1)) == Color.BLACK

    def test_sums_and_clamps(self):
        normal = Vec3(0, 0, 1)
        lights = [DirectionalLight(Vec3(0, 0, -1), Color(0.6, 0.6, 0.0)),
                  DirectionalLight(Vec3(0, 0, -1), Color(0.6, 0.0, 0.3))]
        total = accumulate_light(lights, ORIGIN, normal)
        assert total == Color(1.0, 0.6, 0.3, 1.0)

    def test_relative_point_passed(self):
        seen = []

        class Probe(LightSource):
            location = Vec3(1, 1, 1)

            def compute_color(self, relative_point, normal):
                seen.append(relative_point)
                return Color(0, 0, 0)

        accumulate_light([Probe()], Vec3(3, 2, 1), Vec3(0, 0, 1))
        assert seen == [Vec3(2, 1, 0)]
