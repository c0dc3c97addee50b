"""Per-frame piece motion in board units (1.0 == one square)."""

from __future__ import annotations

import math

Point = tuple[float, float]

DEFAULT_SPEED = 1.0  # squares per second
DEFAULT_SNAP_DISTANCE = 0.1


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def is_settled(
    current: Point, target: Point, snap_distance: float = DEFAULT_SNAP_DISTANCE
) -> bool:
    """Whether *current* is close enough to *target* to stop moving."""
    return distance(current, target) <= snap_distance


def step_toward(
    current: Point,
    target: Point,
    dt: float,
    speed: float = DEFAULT_SPEED,
    snap_distance: float = DEFAULT_SNAP_DISTANCE,
) -> Point:
    """Advance *current* toward *target* for one frame of *dt* seconds.

    Moves at constant *speed* along the straight line to the target and
    never overshoots it. Within *snap_distance* the point stays put.
    """
    dist = distance(current, target)
    if dist == 0.0:
        return target
    if dist <= snap_distance:
        return current
    travel = min(speed * dt, dist)
    return (
        current[0] + (target[0] - current[0]) / dist * travel,
        current[1] + (target[1] - current[1]) / dist * travel,
    )
