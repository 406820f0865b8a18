"""Points of the affine plane, stored as displacement from a global origin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload

from diagrams2d.core.vector import V2, r2, unr2


@dataclass(frozen=True)
class P2:
    vec: V2 = V2()

    @property
    def x(self) -> float:
        return self.vec.x

    @property
    def y(self) -> float:
        return self.vec.y

    def __add__(self, v: V2) -> P2:
        return P2(self.vec + v)

    @overload
    def __sub__(self, other: P2) -> V2: ...

    @overload
    def __sub__(self, other: V2) -> P2: ...

    def __sub__(self, other):
        if isinstance(other, P2):
            return self.vec - other.vec
        return P2(self.vec - other)

    def is_close(self, other: P2, tol: float | None = None) -> bool:
        return self.vec.is_close(other.vec, tol)


ORIGIN = P2(V2(0.0, 0.0))


def p2(xy: tuple[float, float]) -> P2:
    return P2(r2(xy))


def unp2(p: P2) -> tuple[float, float]:
    return unr2(p.vec)


def mk_p2(x: float, y: float) -> P2:
    return p2((x, y))
