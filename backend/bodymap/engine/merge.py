"""Merge engine — join the asset catalogue with caller overrides by slug."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from bodymap.engine.config import ramp_color
from bodymap.models.body import EnrichedRegion, OverrideEntry, RegionDefinition

logger = logging.getLogger(__name__)


def index_overrides(overrides: Iterable[OverrideEntry]) -> dict[str, OverrideEntry]:
    """Build a slug -> override lookup. Later entries replace earlier ones."""
    lookup: dict[str, OverrideEntry] = {}
    for entry in overrides:
        if not entry.slug:
            continue
        if entry.slug in lookup:
            logger.debug("Duplicate override for %s, keeping the last one", entry.slug)
        lookup[entry.slug] = entry
    return lookup


def merge_body_parts(
    catalogue: Sequence[RegionDefinition],
    overrides: Iterable[OverrideEntry],
    hidden: Iterable[str] = (),
    colors: Sequence[str] = (),
) -> list[EnrichedRegion]:
    """Return one EnrichedRegion per visible catalogue entry.

    The outline always comes from the catalogue. When an override exists its
    ``styles``, ``intensity``, ``side`` and ``color`` are attached; a region
    with only an intensity gets ``color`` derived from the ramp here, before
    style resolution. ``styles.fill`` is never derived.
    """
    hidden_set = frozenset(hidden)
    lookup = index_overrides(overrides)

    known = {part.slug for part in catalogue}
    for slug in lookup.keys() - known:
        logger.debug("Override for %s has no catalogue entry, ignoring", slug)

    merged: list[EnrichedRegion] = []
    for part in catalogue:
        if part.slug in hidden_set:
            continue

        entry = lookup.get(part.slug)
        if entry is None:
            merged.append(EnrichedRegion(slug=part.slug, path=part.path))
            continue

        color = entry.color
        has_style_fill = entry.styles is not None and bool(entry.styles.fill)
        if not has_style_fill and not color and entry.intensity and entry.intensity > 0:
            color = ramp_color(colors, entry.intensity)

        merged.append(
            EnrichedRegion(
                slug=part.slug,
                path=part.path,
                styles=entry.styles,
                intensity=entry.intensity,
                side=entry.side,
                color=color,
            )
        )

    return merged
