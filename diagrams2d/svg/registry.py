"""Render registry — every primitive type gets one emitter, registered via decorator.

Usage:
    @renders(PathPrim)
    def render_path(backend: SVGBackend, prim: PathPrim) -> list[dict[str, str]]:
        return [{"tag": "path", "d": prim.d()}]

Supporting a new primitive = one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

RenderFn = Callable[[Any, Any], list[dict[str, str]]]


class RenderRegistry:
    """Maps primitive types to the function that emits their SVG elements."""

    def __init__(self) -> None:
        self._renderers: dict[type, RenderFn] = {}

    def register(self, prim_type: type, fn: RenderFn) -> None:
        if prim_type in self._renderers:
            raise ValueError(f"Duplicate renderer for {prim_type.__name__}")
        self._renderers[prim_type] = fn
        logger.debug("Registered renderer for %s", prim_type.__name__)

    def get(self, prim_type: type) -> RenderFn:
        """Renderer for prim_type or its nearest registered base class."""
        for klass in prim_type.__mro__:
            fn = self._renderers.get(klass)
            if fn is not None:
                return fn
        raise KeyError(f"No renderer registered for {prim_type.__name__}")

    def __contains__(self, prim_type: type) -> bool:
        return any(klass in self._renderers for klass in prim_type.__mro__)

    @property
    def count(self) -> int:
        return len(self._renderers)


# Module-level singleton
_registry = RenderRegistry()


def get_registry() -> RenderRegistry:
    return _registry


def renders(prim_type: type, registry: RenderRegistry | None = None):
    """Decorator to register a render function for prim_type."""

    def decorator(fn: RenderFn) -> RenderFn:
        (registry or _registry).register(prim_type, fn)
        return fn

    return decorator
