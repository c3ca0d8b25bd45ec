"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    samples: list[str] = Field(default_factory=list)


class SampleInfo(BaseModel):
    name: str
    rules: int
    expansion_factor: float


class RenderResponse(BaseModel):
    svg: str
    placements: int = 0
    loops: int = 0
    truncated: bool = False
    pruned: int = 0
    processing_time_ms: float = 0.0
