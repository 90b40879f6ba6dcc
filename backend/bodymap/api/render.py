"""POST /api/render — resolve highlights into drawable segments."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from bodymap.config import Settings
from bodymap.dependencies import get_settings
from bodymap.engine.body import RenderResult, render_body
from bodymap.engine.emitter import Segment
from bodymap.models.requests import RenderRequest
from bodymap.models.responses import RenderResponse, SegmentOut

logger = logging.getLogger(__name__)

router = APIRouter()


def segment_out(segment: Segment) -> SegmentOut:
    return SegmentOut(
        key=segment.key,
        slug=segment.slug,
        group=segment.group,
        index=segment.index,
        side=segment.side,
        d=segment.d,
        fill=segment.fill,
        stroke=segment.stroke,
        stroke_width=segment.stroke_width,
        cursor=segment.cursor,
        opacity=segment.opacity,
        aria_disabled=segment.aria_disabled,
        pressable=segment.pressable,
    )


def result_to_response(result: RenderResult) -> RenderResponse:
    width, height = result.view.scaled(result.config.scale)
    return RenderResponse(
        gender=result.config.gender,
        side=result.config.side,
        view_box=result.view.view_box,
        width=width,
        height=height,
        segments=[segment_out(s) for s in result.segments],
        svg=result.to_svg(),
    )


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest, settings: Settings = Depends(get_settings)) -> RenderResponse:
    start = time.perf_counter()

    result = render_body(req.data, req.to_config(settings))

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("Render request resolved in %.1fms", elapsed)
    return result_to_response(result)


@router.post("/render/svg")
async def render_svg(req: RenderRequest, settings: Settings = Depends(get_settings)) -> Response:
    result = render_body(req.data, req.to_config(settings))
    return Response(content=result.to_svg(), media_type="image/svg+xml")
