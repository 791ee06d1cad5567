import logging
from collections import Counter

import numpy as np

from boids.core.rules import select_rule, steer

logger = logging.getLogger(__name__)


def next_position(pos, direction, speed):
    """Euler step of `speed` along `direction`; works per boid or on whole arrays."""
    direction = np.asarray(direction, dtype=np.float64)
    speed = np.asarray(speed, dtype=np.float64)
    delta = np.stack((speed * np.cos(direction), speed * np.sin(direction)), axis=-1)
    return np.asarray(pos, dtype=np.float64) + delta


def wrap(coord, bound):
    """
    Toroidal wrap into [0, bound).

    Only corrects a single overshoot: a coordinate more than one bound below
    zero stays negative.
    """
    coord = np.asarray(coord, dtype=np.float64)
    with np.errstate(invalid="ignore", divide="ignore"):
        wrapped = np.where(coord >= 0, np.mod(coord, bound), bound + coord)
        # bound + tiny negative rounds up to bound itself
        wrapped = np.where(wrapped >= bound, 0.0, wrapped)
    return wrapped if wrapped.ndim else float(wrapped)


def wrap_around(pos, width, height):
    pos = np.asarray(pos, dtype=np.float64)
    return np.column_stack((wrap(pos[:, 0], width), wrap(pos[:, 1], height)))


def step(flock, params=None):
    """
    One simulation tick.

    Every boid picks its rule against the frozen input snapshot, moves along
    its new heading, then all positions are wrapped. The input flock is left
    untouched; `params`, if given, replaces the flock's parameters first.
    """
    if params is not None:
        flock = flock.with_params(params)
    params = flock.params

    directions = np.empty(flock.N)
    debug = logger.isEnabledFor(logging.DEBUG)
    usage = Counter()
    for i in range(flock.N):
        steering = select_rule(flock, i, params)
        if debug:
            usage[steering.rule] += 1
        directions[i] = steer(flock.direction[i], flock.pos[i], steering)

    moved = next_position(flock.pos, directions, flock.speed)
    pos = wrap_around(moved, params.width, params.height)

    if debug:
        counts = ", ".join(f"{rule.value}={n}" for rule, n in usage.items())
        logger.debug("tick over %d boids: %s", flock.N, counts)

    return flock.evolve(pos, directions)


def simulate(flock, steps, params=None):
    """Yield `steps` successive flocks starting after `flock`."""
    for _ in range(steps):
        flock = step(flock, params)
        yield flock
