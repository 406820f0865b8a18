"""Angles — a scalar tagged as a rotation, stored in radians.

Subtraction is plain subtraction: a difference of angles is never wrapped into
[0, 2pi) or (-pi, pi]. Callers that want a canonical representative must ask
for one explicitly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from diagrams2d.config import settings


@dataclass(frozen=True)
class Angle:
    radians: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(math.radians(degrees))

    @classmethod
    def from_turns(cls, turns: float) -> Angle:
        return cls(turns * 2 * math.pi)

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    @property
    def turns(self) -> float:
        return self.radians / (2 * math.pi)

    def __add__(self, other: Angle) -> Angle:
        return Angle(self.radians + other.radians)

    def __sub__(self, other: Angle) -> Angle:
        return Angle(self.radians - other.radians)

    def __neg__(self) -> Angle:
        return Angle(-self.radians)

    def __mul__(self, k: float) -> Angle:
        return Angle(self.radians * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Angle:
        return Angle(self.radians / k)

    def is_close(self, other: Angle, tol: float | None = None) -> bool:
        """Compare radian values without reducing either modulo a full turn."""
        tol = settings.diagrams2d_float_tolerance if tol is None else tol
        return math.isclose(self.radians, other.radians, rel_tol=0.0, abs_tol=tol)

    def __repr__(self) -> str:
        return f"Angle({self.radians!r} rad)"


def rad(x: float) -> Angle:
    return Angle(x)


def deg(x: float) -> Angle:
    return Angle.from_degrees(x)


def turn(x: float) -> Angle:
    return Angle.from_turns(x)


FULL_TURN = Angle(2 * math.pi)
HALF_TURN = Angle(math.pi)
QUARTER_TURN = Angle(math.pi / 2)


def sin_a(a: Angle) -> float:
    return math.sin(a.radians)


def cos_a(a: Angle) -> float:
    return math.cos(a.radians)


def atan2_a(y: float, x: float) -> Angle:
    """Angle of (x, y) from the positive X axis, in (-pi, pi]."""
    return Angle(math.atan2(y, x))
