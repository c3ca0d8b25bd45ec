"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class RenderRequest(BaseModel):
    sample: str = Field(default="square", description="Sample rule set name")
    levels: int = Field(default=5, ge=0, le=12, description="Substitution generations")
    initial_scale: float = Field(default=1.0, gt=0, description="Uniform scale of the root placement")
    scale_with_levels: bool = Field(
        default=False,
        description="Multiply the root scale by expansion_factor**levels",
    )
    bounds: tuple[float, float, float, float] | None = Field(
        default=None,
        description="World-space cull rectangle (xmin, ymin, xmax, ymax)",
    )
    max_tiles: int | None = Field(default=None, gt=0, description="Override the placement cap")
    stroke_width: float = Field(default=0.3, gt=0)

    @model_validator(mode="after")
    def check_bounds(self) -> RenderRequest:
        if self.bounds is not None:
            xmin, ymin, xmax, ymax = self.bounds
            if not (xmin < xmax and ymin < ymax):
                raise ValueError("bounds must satisfy xmin < xmax and ymin < ymax")
        return self
