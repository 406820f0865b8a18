"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from diagrams2d.core.point import mk_p2
from diagrams2d.core.vector import UNIT_X
from diagrams2d.svg.primitives import PathPrim, arrowhead, polyline
from diagrams2d.twod.scale_inv import ScaleInv


def _assert_vertices(prim: PathPrim, expected: list[tuple[float, float]], tol: float = 1e-9) -> None:
    np.testing.assert_allclose(prim.vertices, np.array(expected, dtype=np.float64), rtol=0.0, atol=tol)


@pytest.fixture
def assert_vertices():
    return _assert_vertices


@pytest.fixture
def unit_segment() -> PathPrim:
    """Segment from the origin to (1, 0)."""
    return polyline([(0.0, 0.0), (1.0, 0.0)])


@pytest.fixture
def arrow() -> PathPrim:
    return arrowhead(length=1.0, width=0.6)


@pytest.fixture
def offset_wrapper() -> ScaleInv[PathPrim]:
    """Segment (1,0)-(2,0) pointing along +X, anchored at (1, 0)."""
    return ScaleInv(polyline([(1.0, 0.0), (2.0, 0.0)]), UNIT_X, mk_p2(1.0, 0.0))
