"""Body region models — catalogue definitions, caller overrides, merged regions."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

BodySide = Literal["left", "right"]
ViewSide = Literal["front", "back"]
Gender = Literal["male", "female"]

# Every slug that appears in at least one catalogue collection
SLUGS: tuple[str, ...] = (
    "abs",
    "adductors",
    "ankles",
    "biceps",
    "calves",
    "chest",
    "deltoids",
    "feet",
    "forearm",
    "gluteal",
    "hamstring",
    "hands",
    "hair",
    "head",
    "knees",
    "lower-back",
    "neck",
    "obliques",
    "quadriceps",
    "tibialis",
    "trapezius",
    "triceps",
    "upper-back",
)


class BodyPartStyles(BaseModel):
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None

    model_config = {"frozen": True}


class RegionPath(BaseModel):
    """Outline of one region, grouped by the side it is drawn on."""

    common: tuple[str, ...] = ()
    left: tuple[str, ...] = ()
    right: tuple[str, ...] = ()

    model_config = {"frozen": True}


class RegionDefinition(BaseModel):
    """A catalogue entry. Loaded once, never mutated."""

    slug: str
    path: RegionPath = Field(default_factory=RegionPath)

    model_config = {"frozen": True}


class OverrideEntry(BaseModel):
    """Caller-supplied highlight for one region. Carries no geometry."""

    slug: str | None = None
    color: str | None = None
    intensity: int | None = None  # 1-based index into the color ramp
    side: BodySide | None = None  # restrict the highlight to one side
    styles: BodyPartStyles | None = None

    model_config = {"frozen": True}


class EnrichedRegion(BaseModel):
    """Catalogue outline joined with the caller's override, if any."""

    slug: str
    path: RegionPath = Field(default_factory=RegionPath)
    color: str | None = None
    intensity: int | None = None
    side: BodySide | None = None
    styles: BodyPartStyles | None = None

    model_config = {"frozen": True}
