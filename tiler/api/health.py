"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from tiler.models.responses import HealthResponse, SampleInfo
from tiler.tiling.samples import get_sample, sample_names

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", samples=sample_names())


@router.get("/samples", response_model=list[SampleInfo])
async def samples() -> list[SampleInfo]:
    out = []
    for name in sample_names():
        step = get_sample(name)
        out.append(SampleInfo(name=name, rules=len(step.rules), expansion_factor=step.expansion_factor))
    return out
