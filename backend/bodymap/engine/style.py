"""Style resolver — fill precedence, stroke defaults, disabled state."""

from __future__ import annotations

from dataclasses import dataclass

from bodymap.engine.config import DISABLED_FILL, RenderConfig
from bodymap.models.body import EnrichedRegion


@dataclass(frozen=True)
class PartStyles:
    fill: str
    stroke: str
    stroke_width: float


def is_disabled(slug: str, config: RenderConfig) -> bool:
    return slug in config.disabled_parts


def resolve_fill(region: EnrichedRegion, config: RenderConfig) -> str | None:
    """Highlight fill for a region, or None to fall back to the default.

    Precedence: disabled > styles.fill > color > intensity ramp > None.
    """
    if is_disabled(region.slug, config):
        return DISABLED_FILL

    if region.styles is not None and region.styles.fill:
        return region.styles.fill

    if region.color:
        return region.color

    if region.intensity and region.intensity > 0:
        return config.ramp_color(region.intensity)

    return None


def resolve_part_styles(region: EnrichedRegion, config: RenderConfig) -> PartStyles:
    """Per-part styles layered over the configuration defaults."""
    styles = region.styles
    if styles is None:
        return PartStyles(
            fill=config.default_fill,
            stroke=config.default_stroke,
            stroke_width=config.default_stroke_width,
        )

    return PartStyles(
        fill=styles.fill if styles.fill is not None else config.default_fill,
        stroke=styles.stroke if styles.stroke is not None else config.default_stroke,
        stroke_width=(
            styles.stroke_width if styles.stroke_width is not None else config.default_stroke_width
        ),
    )
