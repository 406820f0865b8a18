"""2D affine geometry and scale-invariant decorations for vector diagrams."""

from diagrams2d.core.angle import Angle, deg, rad, turn
from diagrams2d.core.direction import Direction, angle_between, angle_of, direction
from diagrams2d.core.point import ORIGIN, P2, mk_p2, p2
from diagrams2d.core.transform import IDENTITY, Transformation, apply_with_freeze, move_origin_to, transform
from diagrams2d.core.vector import UNIT_X, UNIT_Y, V2, mk_r2, r2
from diagrams2d.diagram import Diagram, mk_qd
from diagrams2d.twod.scale_inv import ScaleInv, scale_inv, scale_inv_prim

__all__ = [
    "Angle",
    "deg",
    "rad",
    "turn",
    "Direction",
    "direction",
    "angle_of",
    "angle_between",
    "P2",
    "ORIGIN",
    "p2",
    "mk_p2",
    "V2",
    "r2",
    "mk_r2",
    "UNIT_X",
    "UNIT_Y",
    "Transformation",
    "IDENTITY",
    "transform",
    "apply_with_freeze",
    "move_origin_to",
    "Diagram",
    "mk_qd",
    "ScaleInv",
    "scale_inv",
    "scale_inv_prim",
]
