"""Shared fixtures: default parameters and hand-placed flocks."""
import numpy as np
import pytest

from boids.core.flock import Flock, Params


@pytest.fixture
def params():
    """Default parameters in a 640x360 world."""
    return Params()


@pytest.fixture
def build_flock(params):
    """Factory for flocks with explicit positions and headings."""

    def build(positions, directions, speed=3.0, params=params):
        n = len(directions)
        return Flock(
            pos=np.asarray(positions, dtype=np.float64).reshape(n, 2),
            direction=directions,
            speed=np.full(n, speed),
            radius=np.full(n, 5.0),
            color=np.zeros((n, 3), dtype=np.int64),
            params=params,
        )

    return build
