"""Path primitives backed by matplotlib paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from matplotlib.path import Path as MplPath
from matplotlib.transforms import Affine2D
from shapely.geometry import LineString, Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from diagrams2d.config import settings
from diagrams2d.core.point import ORIGIN, P2
from diagrams2d.core.transform import Transformation, translation
from diagrams2d.diagram import Diagram, mk_qd

# SVG path commands per matplotlib vertex code, and vertices each one consumes.
_SVG_COMMANDS = {
    MplPath.MOVETO: ("M", 1),
    MplPath.LINETO: ("L", 1),
    MplPath.CURVE3: ("Q", 2),
    MplPath.CURVE4: ("C", 3),
    MplPath.CLOSEPOLY: ("Z", 0),
}


@dataclass(frozen=True, eq=False)
class PathPrim:
    """A path plus the SVG attributes (fill, stroke, ...) it is drawn with."""

    path: MplPath
    attributes: dict[str, str] = field(default_factory=dict)

    def transform(self, t: Transformation) -> PathPrim:
        return PathPrim(self.path.transformed(Affine2D(t.matrix)), dict(self.attributes))

    def move_origin_to(self, p: P2) -> PathPrim:
        return self.transform(translation(ORIGIN - p))

    @property
    def vertices(self) -> np.ndarray:
        return np.asarray(self.path.vertices, dtype=np.float64)

    @property
    def closed(self) -> bool:
        return self.path.codes is not None and bool(np.any(self.path.codes == MplPath.CLOSEPOLY))

    def is_close(self, other: PathPrim, tol: float | None = None) -> bool:
        tol = settings.diagrams2d_float_tolerance if tol is None else tol
        if self.vertices.shape != other.vertices.shape:
            return False
        return bool(np.allclose(self.vertices, other.vertices, rtol=0.0, atol=tol))

    def d(self, precision: int = 3) -> str:
        """SVG path data."""
        parts: list[str] = []
        for verts, code in self.path.iter_segments(simplify=False, curves=True):
            cmd, n = _SVG_COMMANDS[code]
            coords = np.asarray(verts).reshape(-1, 2)[-n:] if n else []
            nums = " ".join(f"{_num(x, precision)} {_num(y, precision)}" for x, y in coords)
            parts.append(f"{cmd}{nums}" if nums else cmd)
        return " ".join(parts)

    def geometry(self) -> BaseGeometry:
        """Shapely geometry through the (flattened) path."""
        pieces: list[BaseGeometry] = []
        for poly in self.path.to_polygons(closed_only=False):
            if len(poly) >= 3 and self.closed:
                shape = Polygon(poly)
                if not shape.is_valid:
                    shape = shape.buffer(0)
                pieces.append(shape)
            elif len(poly) >= 2:
                pieces.append(LineString(poly))
            elif len(poly) == 1:
                pieces.append(Point(poly[0]))
        return unary_union(pieces)


def _num(value: float, precision: int) -> str:
    # + 0.0 turns -0.0 into 0.0
    return str(round(float(value), precision) + 0.0)


def polyline(points: Sequence[tuple[float, float]], closed: bool = False, **attributes: str) -> PathPrim:
    """Straight segments through the given points."""
    verts = [tuple(p) for p in points]
    codes = [MplPath.MOVETO] + [MplPath.LINETO] * (len(verts) - 1)
    if closed:
        verts.append(verts[0])
        codes.append(MplPath.CLOSEPOLY)
    return PathPrim(MplPath(verts, codes), dict(attributes))


def arrowhead(length: float = 1.0, width: float = 0.6, **attributes: str) -> PathPrim:
    """Filled triangle with its tip at the origin, pointing along +X."""
    half = width / 2
    attrs = {"fill": "currentColor", "stroke": "none", **attributes}
    return polyline([(0.0, 0.0), (-length, half), (-length, -half)], closed=True, **attrs)


def path_diagram(prim: PathPrim) -> Diagram:
    """Diagram whose envelope is the geometry of the path."""
    return mk_qd(prim, envelope=prim.geometry())
