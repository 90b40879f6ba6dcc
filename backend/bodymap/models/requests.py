"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bodymap.config import Settings
from bodymap.engine.config import RenderConfig
from bodymap.models.body import Gender, OverrideEntry, ViewSide


class RenderRequest(BaseModel):
    data: list[OverrideEntry] = Field(default_factory=list, description="Per-region highlights")
    colors: list[str] | None = Field(
        default=None,
        description="Color ramp; intensity N maps to colors[N-1]. Falls back to settings.",
    )
    scale: float = Field(default=1.0, gt=0, description="Wrapper scale factor")
    side: ViewSide = "front"
    gender: Gender = "male"
    disabled_parts: list[str] = Field(default_factory=list)
    hidden_parts: list[str] = Field(default_factory=list)
    default_fill: str | None = None
    default_stroke: str | None = None
    default_stroke_width: float | None = None
    border: str | None = Field(default=None, description='Border color or "none"')

    def to_config(self, settings: Settings) -> RenderConfig:
        """Fill omitted fields from settings and freeze into a RenderConfig."""
        return RenderConfig.build(
            colors=self.colors if self.colors is not None else settings.default_colors,
            disabled_parts=self.disabled_parts,
            hidden_parts=self.hidden_parts,
            scale=self.scale,
            side=self.side,
            gender=self.gender,
            default_fill=self.default_fill if self.default_fill is not None else settings.default_fill,
            default_stroke=(
                self.default_stroke if self.default_stroke is not None else settings.default_stroke
            ),
            default_stroke_width=(
                self.default_stroke_width
                if self.default_stroke_width is not None
                else settings.default_stroke_width
            ),
            border=self.border if self.border is not None else settings.default_border,
        )


class PressRequest(RenderRequest):
    key: str = Field(..., description="Key of the pressed segment, e.g. 'biceps-left-0'")
