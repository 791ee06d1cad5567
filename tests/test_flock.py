"""
Tests for the flock model and initializer.
"""
import numpy as np
import pytest

from boids.config import Config
from boids.core.flock import Boid, Params, make_flock
from boids.core.rules import TWO_PI


class TestMakeFlock:
    """Tests for make_flock."""

    def test_count(self):
        assert len(make_flock(25, 5, 640, 360, rng=0)) == 25

    def test_positions_inset_by_radius(self):
        flock = make_flock(200, 10, 100, 50, rng=0)
        assert np.all((flock.pos[:, 0] >= 10) & (flock.pos[:, 0] <= 90))
        assert np.all((flock.pos[:, 1] >= 10) & (flock.pos[:, 1] <= 40))

    def test_headings_in_range(self):
        flock = make_flock(200, 5, 640, 360, rng=0)
        assert np.all((flock.direction >= 0) & (flock.direction < TWO_PI))

    def test_fixed_speed_and_radius(self):
        flock = make_flock(10, 5, 640, 360, rng=0)
        assert np.all(flock.speed == 3.0)
        assert np.all(flock.radius == 5.0)

    def test_colors(self):
        flock = make_flock(100, 5, 640, 360, rng=0)
        assert flock.color.shape == (100, 3)
        assert np.all((flock.color >= 0) & (flock.color < 250))

    def test_default_params(self):
        params = make_flock(1, 5, 640, 360, rng=0).params
        assert params == Params(
            width=640, height=360, cohesion=50, avoidance=20, alignment=100,
            vision=100, cohere=True, avoid=True, align=True, max_speed=3.5,
        )

    def test_given_params_take_world_size(self):
        flock = make_flock(3, 5, 200, 100, params=Params(vision=40), rng=0)
        assert flock.params.vision == 40
        assert (flock.params.width, flock.params.height) == (200, 100)

    def test_seeded(self):
        a = make_flock(10, 5, 640, 360, rng=42)
        b = make_flock(10, 5, 640, 360, rng=42)
        np.testing.assert_array_equal(a.pos, b.pos)
        np.testing.assert_array_equal(a.direction, b.direction)
        np.testing.assert_array_equal(a.color, b.color)

    @pytest.mark.parametrize(
        "count, radius, width, height",
        [(-1, 5, 100, 100), (5, 5, 0, 100), (5, 5, 100, -1), (5, 50, 100, 200)],
    )
    def test_invalid(self, count, radius, width, height):
        with pytest.raises(ValueError):
            make_flock(count, radius, width, height)


class TestFlock:
    """Tests for the Flock value."""

    def test_iterates_boids(self, build_flock):
        flock = build_flock([(1.0, 2.0), (3.0, 4.0)], [0.5, 1.5])
        boids = flock.boids
        assert boids[1] == Boid(
            position=(3.0, 4.0), direction=1.5, speed=3.0, radius=5.0, color=(0, 0, 0)
        )
        assert [b.direction for b in flock] == [0.5, 1.5]

    def test_arrays_read_only(self, build_flock):
        flock = build_flock([(1.0, 2.0)], [0.5])
        with pytest.raises(ValueError):
            flock.pos[0, 0] = 9.0
        with pytest.raises(ValueError):
            flock.direction[0] = 9.0

    def test_does_not_alias_caller_arrays(self, build_flock):
        pos = np.array([[1.0, 2.0]])
        flock = build_flock(pos, [0.5])
        pos[0, 0] = 9.0
        assert flock.pos[0, 0] == 1.0

    def test_with_params(self, build_flock):
        flock = build_flock([(1.0, 2.0)], [0.5])
        changed = flock.with_params(vision=10.0, align=False)
        assert changed.params.vision == 10.0
        assert changed.params.align is False
        assert flock.params.vision == 100.0
        np.testing.assert_array_equal(changed.pos, flock.pos)

    def test_params_defaults_from_config(self):
        params = Params()
        assert (params.width, params.height) == (Config.WIDTH, Config.HEIGHT)
        assert (params.cohesion, params.avoidance) == (Config.COHESION, Config.AVOIDANCE)
        assert (params.alignment, params.vision) == (Config.ALIGNMENT, Config.VISION)
        assert params.max_speed == Config.MAX_SPEED

    def test_params_frozen(self, params):
        with pytest.raises(AttributeError):
            params.vision = 5.0
