"""Wrapper for creating scale-invariant objects in two dimensions.

A scale-invariant object is moved by translations and rotations but never
resized. Non-uniform scales are the awkward case: ``scaling_x(2)`` applied to a
path changes the angle at which the path ends, so an arrowhead that simply
ignored the scale would point the wrong way. Likewise an object not located at
the parent's origin picks up a translational component from any scale.

``ScaleInv`` therefore stores, next to the payload, a direction vector and a
location point. A transformation is decomposed as follows:

* the direction vector is pushed through the transformation; the change in its
  angle is the rotational component, applied about the stored location rather
  than the global origin;
* the displacement from the location to its image is the translational
  component.

The direction must never be the zero vector. This is not checked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from shapely.geometry import GeometryCollection

from diagrams2d.core.direction import angle_between, direction
from diagrams2d.core.point import ORIGIN, P2
from diagrams2d.core.transform import (
    Transformation,
    move_origin_to,
    rotate,
    rotate_about,
    transform,
    translate,
)
from diagrams2d.core.vector import V2
from diagrams2d.diagram import Diagram, mk_qd

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ScaleInv(Generic[T]):
    payload: T
    direction: V2
    location: P2 = ORIGIN

    def move_origin_to(self, p: P2) -> ScaleInv[T]:
        return ScaleInv(move_origin_to(p, self.payload), self.direction, move_origin_to(p, self.location))

    def transform(self, t: Transformation) -> ScaleInv[T]:
        v, l = self.direction, self.location
        angle = angle_between(direction(v), direction(transform(t, v)))
        l2 = transform(t, l)
        delta = l2 - l
        logger.debug(
            "Scale-invariant decomposition: rotate %.6f rad about (%.4g, %.4g), translate (%.4g, %.4g)",
            angle.radians, l.x, l.y, delta.x, delta.y,
        )
        payload = translate(rotate_about(self.payload, l, angle), delta)
        return ScaleInv(payload, rotate(v, angle), l2)

    def transform_with_freeze(self, t1: Transformation, t2: Transformation) -> ScaleInv[T]:
        """Apply t2 scale-invariantly, then t1 directly to the payload.

        ``t1`` is the transformation accumulated after a freeze: it reaches the
        payload unmodified, scales and all. The direction still tracks only the
        scale-free part. Since the payload has absorbed t1's positional effect,
        the stored location goes back to the origin.
        """
        s1 = self.transform(t2)
        s2 = s1.transform(t1)
        # Later ordinary transforms rotate the payload about the global origin, not its old anchor
        return ScaleInv(transform(t1, s1.payload), s2.direction, ORIGIN)


def scale_inv(payload: T, direction: V2) -> ScaleInv[T]:
    """Create a scale-invariant object pointing along ``direction``, located at the origin."""
    return ScaleInv(payload, direction, ORIGIN)


def scale_inv_prim(payload: T, direction: V2) -> Diagram:
    """Create a diagram from a single scale-invariant primitive.

    The diagram has an empty envelope, trace and query. Those summaries are
    cached by the diagram and would drift out of sync with the primitive as
    soon as a scale is applied, so scale-invariant things should only be used
    as decorations (arrowheads and the like) that don't contribute to them.
    """
    return mk_qd(scale_inv(payload, direction), envelope=GeometryCollection(), query={})
