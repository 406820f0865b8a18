"""Two-dimensional vectors over the explicit basis {XB, YB}."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from diagrams2d.config import settings
from diagrams2d.core.angle import Angle, atan2_a, cos_a, sin_a


class R2Basis(enum.Enum):
    XB = "x"
    YB = "y"


@dataclass(frozen=True)
class V2:
    """Immutable 2D vector. Every operation returns a new vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: V2) -> V2:
        return V2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: V2) -> V2:
        return V2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> V2:
        return V2(-self.x, -self.y)

    def __mul__(self, k: float) -> V2:
        return V2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> V2:
        return V2(self.x / k, self.y / k)

    def dot(self, other: V2) -> float:
        return self.x * other.x + self.y * other.y

    def quadrance(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> V2:
        """Unit vector in the same direction. Undefined for the zero vector."""
        return self / self.norm()

    def is_close(self, other: V2, tol: float | None = None) -> bool:
        tol = settings.diagrams2d_float_tolerance if tol is None else tol
        return math.isclose(self.x, other.x, abs_tol=tol) and math.isclose(self.y, other.y, abs_tol=tol)

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> V2:
        return cls(float(arr[0]), float(arr[1]))


def decompose(v: V2) -> list[tuple[R2Basis, float]]:
    """Coefficients of v along each basis element."""
    return [(R2Basis.XB, v.x), (R2Basis.YB, v.y)]


def decompose_along(v: V2, basis: R2Basis) -> float:
    return v.x if basis is R2Basis.XB else v.y


def recompose(pairs: Iterable[tuple[R2Basis, float]]) -> V2:
    """Sum of coefficient * basis over the given pairs; repeated keys add."""
    x = y = 0.0
    for basis, coeff in pairs:
        if basis is R2Basis.XB:
            x += coeff
        elif basis is R2Basis.YB:
            y += coeff
        else:
            raise ValueError(f"Not an R2 basis element: {basis!r}")
    return V2(x, y)


def r2(xy: tuple[float, float]) -> V2:
    x, y = xy
    return recompose([(R2Basis.XB, x), (R2Basis.YB, y)])


def unr2(v: V2) -> tuple[float, float]:
    return (decompose_along(v, R2Basis.XB), decompose_along(v, R2Basis.YB))


def mk_r2(x: float, y: float) -> V2:
    return r2((x, y))


ZERO = V2(0.0, 0.0)
UNIT_X = V2(1.0, 0.0)
UNIT_Y = V2(0.0, 1.0)
UNIT_NEG_X = V2(-1.0, 0.0)
UNIT_NEG_Y = V2(0.0, -1.0)


def perp(v: V2) -> V2:
    """v rotated a quarter turn counterclockwise, same magnitude."""
    return V2(-v.y, v.x)


def left_turn(v1: V2, v2: V2) -> bool:
    """True if the direction of v2 is reached from v1 by turning left (0 <= theta <= pi)."""
    return v1.dot(perp(v2)) < 0


def e(a: Angle) -> V2:
    """Unit vector at angle a counterclockwise from the positive X axis."""
    return V2(cos_a(a), sin_a(a))


def to_polar(v: V2) -> tuple[float, Angle]:
    return v.norm(), atan2_a(v.y, v.x)


def from_polar(magnitude: float, a: Angle) -> V2:
    return e(a) * magnitude
