"""Diagram — primitives plus the cached summaries the layout layer queries.

Per-primitive state -> PrimEntry (the primitive and its pending transforms)
Whole-diagram state -> Diagram.envelope (bounding geometry) and Diagram.query
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from shapely import affinity
from shapely.geometry import GeometryCollection, Point
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from diagrams2d.core.point import P2
from diagrams2d.core.transform import IDENTITY, Transformation, apply_with_freeze, transform


@dataclass(frozen=True)
class PrimEntry:
    prim: Any
    # Accumulated transform from below the freeze boundary
    ordinary: Transformation = field(default_factory=lambda: IDENTITY)
    # Accumulated transform from above the freeze boundary, None if never frozen
    frozen: Transformation | None = None

    def transform(self, t: Transformation) -> PrimEntry:
        if self.frozen is None:
            return replace(self, ordinary=t * self.ordinary)
        return replace(self, frozen=t * self.frozen)

    def freeze(self) -> PrimEntry:
        if self.frozen is not None:
            return self
        return replace(self, frozen=IDENTITY)

    def resolve(self) -> Any:
        if self.frozen is None:
            return transform(self.ordinary, self.prim)
        return apply_with_freeze(self.frozen, self.ordinary, self.prim)


@dataclass(frozen=True)
class Diagram:
    # Back to front drawing order
    prims: tuple[PrimEntry, ...] = ()
    envelope: BaseGeometry = field(default_factory=GeometryCollection)
    query: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Diagram:
        return cls()

    def transform(self, t: Transformation) -> Diagram:
        return Diagram(
            prims=tuple(entry.transform(t) for entry in self.prims),
            envelope=affinity.affine_transform(self.envelope, t.to_shapely()),
            query=dict(self.query),
        )

    def freeze(self) -> Diagram:
        """Everything transformed from here on reaches the primitives unmodified."""
        return replace(self, prims=tuple(entry.freeze() for entry in self.prims))

    def atop(self, other: Diagram) -> Diagram:
        """Place self on top of other."""
        return Diagram(
            prims=other.prims + self.prims,
            envelope=unary_union([other.envelope, self.envelope]),
            query={**other.query, **self.query},
        )

    def resolved_prims(self) -> list[Any]:
        return [entry.resolve() for entry in self.prims]

    def bounds(self) -> tuple[float, float, float, float] | None:
        """(xmin, ymin, xmax, ymax), or None for an empty envelope."""
        if self.envelope.is_empty:
            return None
        xmin, ymin, xmax, ymax = self.envelope.bounds
        return (float(xmin), float(ymin), float(xmax), float(ymax))

    def hit(self, p: P2) -> bool:
        if self.envelope.is_empty:
            return False
        return bool(self.envelope.covers(Point(p.x, p.y)))

    def query_at(self, key: str, default: Any = None) -> Any:
        return self.query.get(key, default)


def mk_qd(prim: Any, envelope: BaseGeometry, query: dict[str, Any] | None = None) -> Diagram:
    return Diagram(prims=(PrimEntry(prim),), envelope=envelope, query=dict(query or {}))
