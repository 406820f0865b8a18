"""Options for rendering a diagram to an SVG document."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenderOptions(BaseModel):
    width: float = Field(default=24.0, gt=0, description="Canvas width in user units")
    height: float = Field(default=24.0, gt=0, description="Canvas height in user units")
    title: str = Field(default="", description="Text for the <title> element")
    description: str = Field(default="", description="Text for the <desc> element")
    flip_y: bool = Field(
        default=True,
        description="Map diagram coordinates (y up) onto SVG coordinates (y down)",
    )
    precision: int | None = Field(
        default=None,
        ge=0,
        description="Decimal places for coordinates; defaults to the configured precision",
    )
