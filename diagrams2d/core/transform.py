"""Affine transformations and the capabilities transformable values expose.

A ``Transformation`` is a 3x3 homogeneous matrix. Vectors see only its linear
part; points see the full affine map. Anything else participates through the
structural protocols below: no base class is required, an object just needs
the right method.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from diagrams2d.config import settings
from diagrams2d.core.angle import Angle
from diagrams2d.core.point import ORIGIN, P2
from diagrams2d.core.vector import V2

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Transformation:
    matrix: NDArray[np.float64] = field(default_factory=lambda: np.eye(3))

    def __post_init__(self) -> None:
        m = np.array(self.matrix, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError(f"Expected a 3x3 affine matrix, got shape {m.shape}")
        m.setflags(write=False)
        object.__setattr__(self, "matrix", m)

    def __mul__(self, other: Transformation) -> Transformation:
        """``(t1 * t2)`` applies t2 first, then t1."""
        return Transformation(self.matrix @ other.matrix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transformation):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    __hash__ = None  # type: ignore[assignment]

    def is_close(self, other: Transformation, tol: float | None = None) -> bool:
        tol = settings.diagrams2d_float_tolerance if tol is None else tol
        return bool(np.allclose(self.matrix, other.matrix, rtol=0.0, atol=tol))

    @property
    def linear(self) -> NDArray[np.float64]:
        return self.matrix[:2, :2]

    @property
    def offset(self) -> V2:
        return V2(float(self.matrix[0, 2]), float(self.matrix[1, 2]))

    def apply_vector(self, v: V2) -> V2:
        return V2.from_array(self.linear @ v.as_array())

    def apply_point(self, p: P2) -> P2:
        return P2(self.apply_vector(p.vec) + self.offset)

    def inverse(self) -> Transformation:
        return Transformation(np.linalg.inv(self.matrix))

    def to_shapely(self) -> list[float]:
        """Coefficients in the order shapely.affinity.affine_transform expects."""
        m = self.matrix
        return [m[0, 0], m[0, 1], m[1, 0], m[1, 1], m[0, 2], m[1, 2]]

    def __repr__(self) -> str:
        return f"Transformation({self.matrix[:2].tolist()!r})"


IDENTITY = Transformation()


def translation(v: V2) -> Transformation:
    m = np.eye(3)
    m[0, 2], m[1, 2] = v.x, v.y
    return Transformation(m)


def rotation(a: Angle) -> Transformation:
    """Counterclockwise rotation about the global origin."""
    c, s = math.cos(a.radians), math.sin(a.radians)
    return Transformation(np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]))


def rotation_about(p: P2, a: Angle) -> Transformation:
    to_p = p - ORIGIN
    return translation(to_p) * rotation(a) * translation(-to_p)


def scaling(s: float) -> Transformation:
    return scaling_xy(s, s)


def scaling_x(s: float) -> Transformation:
    return scaling_xy(s, 1.0)


def scaling_y(s: float) -> Transformation:
    return scaling_xy(1.0, s)


def scaling_xy(sx: float, sy: float) -> Transformation:
    return Transformation(np.diag([sx, sy, 1.0]))


def reflection_x() -> Transformation:
    """Flip across the Y axis (x -> -x)."""
    return scaling_x(-1.0)


def reflection_y() -> Transformation:
    """Flip across the X axis (y -> -y)."""
    return scaling_y(-1.0)


@runtime_checkable
class Transformable(Protocol):
    def transform(self, t: Transformation) -> Any: ...


@runtime_checkable
class HasOrigin(Protocol):
    def move_origin_to(self, p: P2) -> Any: ...


@runtime_checkable
class Freezable(Protocol):
    def transform_with_freeze(self, t1: Transformation, t2: Transformation) -> Any: ...


def transform(t: Transformation, obj: T) -> T:
    if isinstance(obj, V2):
        return t.apply_vector(obj)  # type: ignore[return-value]
    if isinstance(obj, P2):
        return t.apply_point(obj)  # type: ignore[return-value]
    if isinstance(obj, Transformation):
        return t * obj  # type: ignore[return-value]
    if isinstance(obj, Transformable):
        return obj.transform(t)
    raise TypeError(f"Cannot transform object of type {type(obj).__name__}")


def apply_with_freeze(t1: Transformation, t2: Transformation, obj: T) -> T:
    """Apply t2 normally, then t1 as a frozen transform.

    Objects without a freeze-aware implementation just get ``t1 * t2``.
    """
    if isinstance(obj, Freezable):
        return obj.transform_with_freeze(t1, t2)
    return transform(t1 * t2, obj)


def move_origin_to(p: P2, obj: T) -> T:
    """Re-express obj relative to a new local origin p."""
    if isinstance(obj, P2):
        return P2(obj - p)  # type: ignore[return-value]
    if isinstance(obj, V2):
        return obj  # type: ignore[return-value]
    if isinstance(obj, HasOrigin):
        return obj.move_origin_to(p)
    if isinstance(obj, Transformable):
        return obj.transform(translation(ORIGIN - p))
    raise TypeError(f"Cannot move origin of object of type {type(obj).__name__}")


def translate(obj: T, v: V2) -> T:
    return transform(translation(v), obj)


def rotate(obj: T, a: Angle) -> T:
    return transform(rotation(a), obj)


def rotate_about(obj: T, pivot: P2, a: Angle) -> T:
    return transform(rotation_about(pivot, a), obj)


def scale(obj: T, s: float) -> T:
    return transform(scaling(s), obj)
