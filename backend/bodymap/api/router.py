"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from bodymap.api import health, press, render

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(render.router)
api_router.include_router(press.router)
