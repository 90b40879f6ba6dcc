"""POST /api/press — route a press on a segment back to its region."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from bodymap.config import Settings
from bodymap.dependencies import get_settings
from bodymap.engine.body import Body
from bodymap.engine.dispatch import find_segment
from bodymap.models.body import BodySide, EnrichedRegion
from bodymap.models.requests import PressRequest
from bodymap.models.responses import PressResponse

router = APIRouter()


@router.post("/press", response_model=PressResponse)
async def press(req: PressRequest, settings: Settings = Depends(get_settings)) -> PressResponse:
    pressed: list[tuple[EnrichedRegion, BodySide | None]] = []

    def _on_press(region: EnrichedRegion, side: BodySide | None) -> None:
        pressed.append((region, side))

    body = Body(req.to_config(settings), on_press=_on_press)
    result = body.render(req.data)

    try:
        segment = find_segment(result.segments, req.key)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown segment key: {req.key}") from None

    dispatched = body.dispatcher.press(segment)
    region, side = pressed[0] if pressed else (None, segment.side)

    return PressResponse(
        key=segment.key,
        dispatched=dispatched,
        slug=segment.slug,
        side=side,
        region=region,
    )
