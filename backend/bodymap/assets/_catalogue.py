"""Catalogue loading — raw asset records into frozen RegionDefinitions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bodymap.models.body import RegionDefinition

Catalogue = tuple[RegionDefinition, ...]


def load_catalogue(records: Iterable[dict[str, Any]]) -> Catalogue:
    """Validate asset records once at import time. Slugs must be unique per collection."""
    parts = tuple(RegionDefinition.model_validate(record) for record in records)

    seen: set[str] = set()
    for part in parts:
        if part.slug in seen:
            raise ValueError(f"Duplicate slug in catalogue: {part.slug}")
        seen.add(part.slug)

    return parts
