"""POST /api/render: expand a sample rule set and return it as SVG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from tiler.config import Settings
from tiler.dependencies import get_settings
from tiler.models.requests import RenderRequest
from tiler.models.responses import RenderResponse
from tiler.svg.serializer import serialize_tiling_svg
from tiler.tiling.emitter import loop_count, placements_to_path
from tiler.tiling.expansion import ExpansionConfig, create_engine
from tiler.tiling.model import RuleSetError
from tiler.tiling.samples import get_sample
from tiler.utils.geometry import bbox

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest, settings: Settings = Depends(get_settings)) -> RenderResponse:
    start = time.perf_counter()

    try:
        step = get_sample(req.sample)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown sample: {req.sample}")

    try:
        step.validate()
    except RuleSetError as e:
        raise HTTPException(status_code=422, detail=str(e))

    config = ExpansionConfig(polygon_limit=req.max_tiles or settings.polygon_limit)
    engine = create_engine(step, config)
    result = engine.expand_from_root(
        req.levels,
        req.initial_scale,
        bounds=req.bounds,
        scale_with_levels=req.scale_with_levels,
    )
    path = placements_to_path(step, result.placements)

    view = req.bounds or bbox(path.vertices)
    svg = serialize_tiling_svg(path, view, stroke_width=req.stroke_width, title=req.sample)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Rendered %s: %d placements in %.0fms", req.sample, len(result), elapsed)
    return RenderResponse(
        svg=svg,
        placements=len(result),
        loops=loop_count(path),
        truncated=result.truncated,
        pruned=result.pruned,
        processing_time_ms=round(elapsed, 1),
    )
