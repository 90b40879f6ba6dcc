"""Segment emitter — expand resolved regions into drawable path segments."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from bodymap.engine.config import RenderConfig
from bodymap.engine.merge import merge_body_parts
from bodymap.engine.style import is_disabled, resolve_fill, resolve_part_styles
from bodymap.models.body import BodySide, EnrichedRegion, OverrideEntry, RegionDefinition

logger = logging.getLogger(__name__)

PathGroup = Literal["common", "left", "right"]

_OPPOSITE: dict[str, str] = {"left": "right", "right": "left"}

# Affordance for disabled vs. pressable segments
_DISABLED_CURSOR = "not-allowed"
_ENABLED_CURSOR = "pointer"
_DISABLED_OPACITY = 0.6
_ENABLED_OPACITY = 1.0


@dataclass(frozen=True)
class Segment:
    """One concrete path of a region, ready to draw."""

    key: str
    slug: str
    group: PathGroup
    index: int
    d: str
    fill: str
    stroke: str
    stroke_width: float
    cursor: str
    opacity: float
    aria_disabled: bool
    # Press binding: (region, side). None when the region is disabled.
    region: EnrichedRegion | None
    side: BodySide | None = None

    @property
    def pressable(self) -> bool:
        return self.region is not None


def segment_key(slug: str, group: PathGroup, index: int) -> str:
    return f"{slug}-{group}-{index}"


def emit_segments(region: EnrichedRegion, config: RenderConfig) -> list[Segment]:
    """Emit common, then left, then right segments for one region.

    A side-restricted region paints the opposite side with the default fill.
    Disabled regions keep the disabled fill everywhere and get no press binding.
    """
    disabled = is_disabled(region.slug, config)
    part_styles = resolve_part_styles(region, config)
    highlight = resolve_fill(region, config)
    fill = highlight if highlight is not None else part_styles.fill

    groups: tuple[tuple[PathGroup, Sequence[str]], ...] = (
        ("common", region.path.common),
        ("left", region.path.left),
        ("right", region.path.right),
    )

    segments: list[Segment] = []
    for group, paths in groups:
        side: BodySide | None = None if group == "common" else group
        group_fill = fill
        if side is not None and not disabled and region.side == _OPPOSITE[side]:
            group_fill = config.default_fill

        for index, d in enumerate(paths):
            segments.append(
                Segment(
                    key=segment_key(region.slug, group, index),
                    slug=region.slug,
                    group=group,
                    index=index,
                    d=d,
                    fill=group_fill,
                    stroke=part_styles.stroke,
                    stroke_width=part_styles.stroke_width,
                    cursor=_DISABLED_CURSOR if disabled else _ENABLED_CURSOR,
                    opacity=_DISABLED_OPACITY if disabled else _ENABLED_OPACITY,
                    aria_disabled=disabled,
                    region=None if disabled else region,
                    side=side,
                )
            )

    return segments


def render_segments(
    catalogue: Sequence[RegionDefinition],
    overrides: Iterable[OverrideEntry],
    config: RenderConfig,
) -> list[Segment]:
    """Merge the catalogue with overrides and emit every segment in catalogue order."""
    regions = merge_body_parts(
        catalogue,
        overrides,
        hidden=config.hidden_parts,
        colors=config.colors,
    )

    segments: list[Segment] = []
    for region in regions:
        segments.extend(emit_segments(region, config))

    logger.debug(
        "Emitted %d segments for %d regions (%s/%s)",
        len(segments),
        len(regions),
        config.gender,
        config.side,
    )
    return segments
