"""Logging setup for applications embedding diagrams2d."""

from __future__ import annotations

import logging

from diagrams2d.config import settings


def configure_logging(level: str | None = None) -> None:
    """Install a root handler. Library modules only ever call getLogger."""
    name = (level or settings.diagrams2d_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
