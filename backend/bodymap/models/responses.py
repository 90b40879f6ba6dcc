"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bodymap.models.body import BodySide, EnrichedRegion


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    catalogue_sizes: dict[str, int] = Field(default_factory=dict)


class SegmentOut(BaseModel):
    key: str
    slug: str
    group: str
    index: int
    side: BodySide | None = None
    d: str
    fill: str
    stroke: str
    stroke_width: float
    cursor: str
    opacity: float
    aria_disabled: bool
    pressable: bool


class RenderResponse(BaseModel):
    gender: str
    side: str
    view_box: tuple[float, float, float, float]
    width: float
    height: float
    segments: list[SegmentOut] = Field(default_factory=list)
    svg: str = ""


class PressResponse(BaseModel):
    key: str
    dispatched: bool = False
    slug: str
    side: BodySide | None = None
    region: EnrichedRegion | None = None
