"""Directions: vectors with the magnitude thrown away.

``direction(v)`` is only meaningful for nonzero ``v``. For the zero vector the
result is whatever ``atan2(0, 0)`` gives (angle 0); nothing checks for it.
"""

from __future__ import annotations

from dataclasses import dataclass

from diagrams2d.core.angle import Angle, atan2_a
from diagrams2d.core.vector import UNIT_X, V2, e


@dataclass(frozen=True)
class Direction:
    # Angle CCW from the positive X axis, as produced by atan2
    theta: Angle

    def __sub__(self, other: Direction) -> Angle:
        return angle_between(other, self)


def direction(v: V2) -> Direction:
    return Direction(atan2_a(v.y, v.x))


def from_direction(d: Direction) -> V2:
    """Unit vector pointing along d."""
    return e(d.theta)


def angle_of(d: Direction) -> Angle:
    return d.theta


def angle_between(d1: Direction, d2: Direction) -> Angle:
    """Signed angle rotating d1 onto d2. Plain subtraction, no wrapping."""
    return angle_of(d2) - angle_of(d1)


X_DIR = direction(UNIT_X)
