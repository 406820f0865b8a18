"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    diagrams2d_log_level: str = "warning"

    # Absolute tolerance for approximate geometric comparisons
    diagrams2d_float_tolerance: float = 1e-9

    # Decimal places for coordinates written to SVG
    diagrams2d_svg_precision: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
