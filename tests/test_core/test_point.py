"""Tests for affine points."""

from diagrams2d.core.point import ORIGIN, P2, mk_p2, p2, unp2
from diagrams2d.core.vector import V2


def test_point_minus_point_is_vector():
    assert mk_p2(3.0, 5.0) - mk_p2(1.0, 1.0) == V2(2.0, 4.0)


def test_point_plus_vector_is_point():
    assert mk_p2(1.0, 1.0) + V2(2.0, -1.0) == mk_p2(3.0, 0.0)
    assert mk_p2(1.0, 1.0) - V2(1.0, 1.0) == ORIGIN


def test_coordinates():
    p = p2((2.5, -1.0))
    assert (p.x, p.y) == (2.5, -1.0)
    assert unp2(p) == (2.5, -1.0)
    assert ORIGIN == P2(V2(0.0, 0.0))
