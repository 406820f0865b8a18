"""SVG backend — turns resolved diagram primitives into SVG elements."""

from __future__ import annotations

import logging
from typing import Any

from diagrams2d.config import settings
from diagrams2d.core.transform import reflection_y, translation
from diagrams2d.core.vector import V2
from diagrams2d.diagram import Diagram
from diagrams2d.svg.options import RenderOptions
from diagrams2d.svg.primitives import PathPrim
from diagrams2d.svg.registry import RenderRegistry, get_registry, renders
from diagrams2d.svg.serializer import serialize_svg
from diagrams2d.twod.scale_inv import ScaleInv

logger = logging.getLogger(__name__)


class SVGBackend:
    def __init__(self, registry: RenderRegistry | None = None, precision: int | None = None) -> None:
        self.registry = registry or get_registry()
        self.precision = settings.diagrams2d_svg_precision if precision is None else precision

    def render(self, obj: Any) -> list[dict[str, str]]:
        """Element dicts for a single primitive."""
        return self.registry.get(type(obj))(self, obj)

    def render_diagram(self, diagram: Diagram, options: RenderOptions | None = None) -> str:
        options = options or RenderOptions()
        backend = self if options.precision is None else SVGBackend(self.registry, options.precision)
        if options.flip_y:
            # Canvas mapping, not a user transform: reaches payloads unmodified
            diagram = diagram.freeze().transform(translation(V2(0.0, options.height)) * reflection_y())

        elements: list[dict[str, str]] = []
        for prim in diagram.resolved_prims():
            elements.extend(backend.render(prim))

        logger.info("Rendered SVG: %d elements, canvas %g×%g", len(elements), options.width, options.height)
        return serialize_svg(elements, options)


@renders(PathPrim)
def render_path(backend: SVGBackend, prim: PathPrim) -> list[dict[str, str]]:
    return [{"tag": "path", "d": prim.d(backend.precision), **prim.attributes}]


@renders(ScaleInv)
def render_scale_inv(backend: SVGBackend, obj: ScaleInv) -> list[dict[str, str]]:
    # Direction and location only steer transforms; they are never drawn.
    return backend.render(obj.payload)
