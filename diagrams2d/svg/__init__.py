"""SVG output: path primitives, render registry and backend."""

from diagrams2d.svg.backend import SVGBackend
from diagrams2d.svg.options import RenderOptions
from diagrams2d.svg.primitives import PathPrim, arrowhead, path_diagram, polyline

__all__ = ["SVGBackend", "RenderOptions", "PathPrim", "arrowhead", "path_diagram", "polyline"]
