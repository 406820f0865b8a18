"""Tests for 2D vectors and the {XB, YB} basis."""

import math

import pytest

from diagrams2d.core.angle import deg
from diagrams2d.core.vector import (
    UNIT_NEG_Y,
    UNIT_X,
    UNIT_Y,
    R2Basis,
    V2,
    decompose,
    decompose_along,
    e,
    from_polar,
    left_turn,
    mk_r2,
    perp,
    recompose,
    r2,
    to_polar,
    unr2,
)


@pytest.mark.parametrize("xy", [(0.0, 0.0), (1.5, -2.25), (-1e6, 3e-7)])
def test_decompose_recompose_round_trip(xy):
    v = r2(xy)
    assert dict(decompose(v)) == {R2Basis.XB: xy[0], R2Basis.YB: xy[1]}
    assert unr2(recompose(decompose(v))) == xy


def test_decompose_along():
    v = mk_r2(3.0, 4.0)
    assert decompose_along(v, R2Basis.XB) == 3.0
    assert decompose_along(v, R2Basis.YB) == 4.0


def test_recompose_sums_repeated_keys():
    v = recompose([(R2Basis.XB, 1.0), (R2Basis.YB, 2.0), (R2Basis.XB, 0.5)])
    assert v == V2(1.5, 2.0)


def test_recompose_rejects_foreign_basis():
    with pytest.raises(ValueError):
        recompose([("z", 1.0)])


def test_vector_space_ops():
    a, b = V2(1.0, 2.0), V2(3.0, -1.0)
    assert a + b == V2(4.0, 1.0)
    assert a - b == V2(-2.0, 3.0)
    assert -a == V2(-1.0, -2.0)
    assert 2 * a == a * 2 == V2(2.0, 4.0)
    assert b / 2 == V2(1.5, -0.5)
    assert a.dot(b) == 1.0
    assert V2(3.0, 4.0).norm() == 5.0
    assert V2(3.0, 4.0).quadrance() == 25.0
    assert V2(0.0, -2.0).normalized() == UNIT_NEG_Y


def test_operations_do_not_mutate():
    a = V2(1.0, 2.0)
    _ = a + V2(1.0, 1.0)
    assert a == V2(1.0, 2.0)


def test_perp_is_quarter_turn():
    assert perp(UNIT_X) == UNIT_Y
    assert perp(V2(2.0, 3.0)) == V2(-3.0, 2.0)


def test_left_turn():
    assert left_turn(UNIT_X, UNIT_Y)
    assert not left_turn(UNIT_X, UNIT_NEG_Y)


def test_unit_vector_at_angle():
    assert e(deg(90)).is_close(UNIT_Y)
    assert e(deg(0)) == UNIT_X


def test_polar():
    magnitude, angle = to_polar(V2(3.0, 4.0))
    assert magnitude == 5.0
    assert math.isclose(angle.radians, math.atan2(4.0, 3.0))
    assert from_polar(magnitude, angle).is_close(V2(3.0, 4.0))
