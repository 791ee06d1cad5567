"""
Steering rules for a single boid.

Each tick a boid looks at the flock snapshot, picks exactly one rule in fixed
priority order (avoid > cohere > align > hold) and turns accordingly:

    avoid   - some neighbour is inside the avoidance radius: turn away from
              their average position
    cohere  - the average neighbour position is further than the cohesion
              radius: turn towards it
    align   - some neighbour is inside the alignment radius: move halfway to
              their mean heading
    hold    - keep the current heading

Avoidance and alignment neighbours are always filtered out of the vision
neighbours, never out of the whole flock.
"""

import enum
import math
import operator
from dataclasses import dataclass
from typing import Any, NamedTuple

import numpy as np

from boids.config import Config

TWO_PI = 2 * math.pi
TURN_STEP = Config.TURN_STEP


def boid_distance(p1, p2):
    """
    Distance between points, |dx| and |dy| squared then summed.
    Either argument may be an (N, 2) array, giving N distances.
    """
    d = np.abs(np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64))
    return np.sqrt(np.sum(d**2, axis=-1))


@dataclass(frozen=True)
class Neighbors:
    """Indices into the flock arrays plus the distance to each one."""

    indices: np.ndarray
    distances: np.ndarray

    def __len__(self):
        return len(self.indices)

    def __bool__(self):
        return len(self.indices) > 0


def neighbors(pos, index, candidates, threshold):
    """
    Boids among `candidates` closer than `threshold` to boid `index`.

    `candidates` is an index array, a previous Neighbors result, or None for
    the whole flock. The querying boid is never part of the result.
    """
    if candidates is None:
        candidates = np.arange(len(pos))
    elif isinstance(candidates, Neighbors):
        candidates = candidates.indices
    candidates = np.asarray(candidates, dtype=np.intp)
    candidates = candidates[candidates != index]

    distances = boid_distance(pos[index], pos[candidates])
    keep = distances < threshold
    return Neighbors(indices=candidates[keep], distances=distances[keep])


def average_position(points):
    return np.mean(np.asarray(points, dtype=np.float64), axis=0)


def average_heading(headings):
    # Plain arithmetic mean, not a circular one: 0.1 and 6.2 average to ~3.15
    return float(np.mean(headings))


def heading_to_angle(point):
    return math.atan2(point[1], point[0])


def direction(radians):
    """Normalize a heading into [0, 2pi)."""
    radians = float(radians)
    if radians < 0:
        # float % can land exactly on 2pi for tiny negatives, the second pass folds it to 0
        radians %= TWO_PI
    return radians % TWO_PI


def update_direction(current, p1, p2, turn_towards, turn_away):
    """Turn by TURN_STEP depending on how the polar angles of p1 and p2 compare."""
    if heading_to_angle(p1) < heading_to_angle(p2):
        return direction(turn_towards(current, TURN_STEP))
    return direction(turn_away(current, TURN_STEP))


def cohere(current, position, target):
    return update_direction(current, position, target, operator.add, operator.sub)


def avoid(current, position, target):
    return update_direction(current, position, target, operator.sub, operator.add)


def align(current, headings):
    """Move halfway towards the mean heading of `headings`."""
    headings = np.asarray(headings, dtype=np.float64)
    if headings.size == 0:
        return current

    avg = average_heading(headings)
    diff = abs(current - avg)
    if current > avg:
        return direction(current - diff / 2)
    return direction(current + diff / 2)


class Rule(enum.Enum):
    AVOID = "avoid"
    COHERE = "cohere"
    ALIGN = "align"
    HOLD = "hold"


class Steering(NamedTuple):
    rule: Rule
    # Average position for AVOID/COHERE, neighbour headings for ALIGN
    target: Any = None


def select_rule(flock, index, params=None):
    """Pick the single rule boid `index` follows this tick."""
    params = params if params is not None else flock.params
    pos = flock.pos

    in_range = neighbors(pos, index, None, params.vision)
    to_avoid = neighbors(pos, index, in_range, params.avoidance)
    to_align = neighbors(pos, index, in_range, params.alignment)

    if params.avoid and to_avoid:
        crowd = neighbors(pos, index, to_avoid, params.avoidance)
        return Steering(Rule.AVOID, average_position(pos[crowd.indices]))

    if params.cohere and in_range:
        centre = average_position(pos[in_range.indices])
        if boid_distance(pos[index], centre) > params.cohesion:
            return Steering(Rule.COHERE, centre)

    if params.align and to_align:
        return Steering(Rule.ALIGN, flock.direction[to_align.indices])

    return Steering(Rule.HOLD)


def steer(current, position, steering):
    """Apply a Steering decision to a heading."""
    current = float(current)
    if steering.rule is Rule.AVOID:
        return avoid(current, position, steering.target)
    if steering.rule is Rule.COHERE:
        return cohere(current, position, steering.target)
    if steering.rule is Rule.ALIGN:
        return align(current, steering.target)
    return current


def boid_direction(flock, index, params=None):
    """Next heading of boid `index` given the flock snapshot."""
    steering = select_rule(flock, index, params)
    return steer(flock.direction[index], flock.pos[index], steering)
