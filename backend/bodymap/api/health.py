"""Health check + catalogue meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from bodymap import __version__
from bodymap.engine.view import select_catalogue
from bodymap.models.responses import HealthResponse

router = APIRouter()

_COMBINATIONS = [(g, s) for g in ("male", "female") for s in ("front", "back")]


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        catalogue_sizes={f"{g}/{s}": len(select_catalogue(g, s)) for g, s in _COMBINATIONS},
    )


@router.get("/slugs")
async def slugs() -> dict[str, list[str]]:
    return {f"{g}/{s}": [part.slug for part in select_catalogue(g, s)] for g, s in _COMBINATIONS}
