import dataclasses
import logging
from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np

from boids.config import Config

logger = logging.getLogger(__name__)

TWO_PI = 2 * np.pi


class Boid(NamedTuple):
    """Read-only view of one boid, as handed to the renderer."""

    position: Tuple[float, float]
    direction: float
    speed: float
    radius: float
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class Params:
    """
    World bounds and rule parameters for one tick.

    The driver owns this value and replaces it between ticks; nothing here is
    validated, so a negative radius simply never matches a neighbour.
    """

    width: float = Config.WIDTH
    height: float = Config.HEIGHT
    cohesion: float = Config.COHESION
    avoidance: float = Config.AVOIDANCE
    alignment: float = Config.ALIGNMENT
    vision: float = Config.VISION
    cohere: bool = Config.COHERE
    avoid: bool = Config.AVOID
    align: bool = Config.ALIGN
    max_speed: float = Config.MAX_SPEED


@dataclass(frozen=True, eq=False)
class Flock:
    """
    Immutable flock snapshot.

    Boids are stored as parallel arrays:
        pos:       (N, 2) world coordinates
        direction: (N,)   heading in [0, 2pi)
        speed:     (N,)
        radius:    (N,)
        color:     (N, 3)
    """

    pos: np.ndarray
    direction: np.ndarray
    speed: np.ndarray
    radius: np.ndarray
    color: np.ndarray
    params: Params = Params()

    def __post_init__(self):
        n = len(self.direction)
        arrays = {
            "pos": np.array(self.pos, dtype=np.float64).reshape(n, 2),
            "direction": np.array(self.direction, dtype=np.float64),
            "speed": np.array(self.speed, dtype=np.float64),
            "radius": np.array(self.radius, dtype=np.float64),
            "color": np.array(self.color, dtype=np.int64).reshape(n, 3),
        }
        for name, arr in arrays.items():
            arr.flags.writeable = False
            object.__setattr__(self, name, arr)

    @property
    def N(self):
        return len(self.direction)

    def __len__(self):
        return self.N

    def __iter__(self):
        for i in range(self.N):
            yield self.boid(i)

    def boid(self, i):
        return Boid(
            position=(float(self.pos[i, 0]), float(self.pos[i, 1])),
            direction=float(self.direction[i]),
            speed=float(self.speed[i]),
            radius=float(self.radius[i]),
            color=tuple(int(c) for c in self.color[i]),
        )

    @property
    def boids(self):
        return list(self)

    def with_params(self, params=None, **changes):
        """Copy of the flock under new parameters (boid arrays are shared)."""
        params = params if params is not None else self.params
        if changes:
            params = dataclasses.replace(params, **changes)
        return dataclasses.replace(self, params=params)

    def evolve(self, pos, direction):
        """Copy of the flock with new positions and headings."""
        return Flock(
            pos=pos,
            direction=direction,
            speed=self.speed,
            radius=self.radius,
            color=self.color,
            params=self.params,
        )


def make_flock(count, radius, width, height, params=None, rng=None):
    """
    Spawn `count` boids at random.

    Positions are uniform inside the world inset by `radius` from each edge,
    headings uniform in [0, 2pi), speed fixed at Config.SPEED and colors
    random. `rng` may be a numpy Generator or an int seed.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if width <= 0 or height <= 0:
        raise ValueError(f"world dimensions must be positive, got {width}x{height}")
    if width - 2 * radius <= 0 or height - 2 * radius <= 0:
        raise ValueError(
            f"radius {radius} leaves no room to spawn in a {width}x{height} world"
        )

    rng = np.random.default_rng(rng)

    pos = np.column_stack(
        (
            rng.uniform(radius, width - radius, size=count),
            rng.uniform(radius, height - radius, size=count),
        )
    )
    direction = rng.uniform(0, TWO_PI, size=count)
    speed = np.full(count, Config.SPEED)
    radii = np.full(count, float(radius))
    color = rng.integers(0, Config.COLOR_MAX, size=(count, 3))

    if params is None:
        params = Params(width=width, height=height)
    else:
        params = dataclasses.replace(params, width=width, height=height)

    logger.info("Spawned flock of %d boids in a %gx%g world", count, width, height)
    return Flock(
        pos=pos,
        direction=direction,
        speed=speed,
        radius=radii,
        color=color,
        params=params,
    )
