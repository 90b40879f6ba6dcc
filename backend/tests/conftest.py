"""Shared test fixtures."""

from __future__ import annotations

import pytest

from bodymap.engine.config import RenderConfig
from bodymap.models.body import RegionDefinition, RegionPath


RAMP = ("#0984e3", "#74b9ff")
DEFAULT_FILL = "#3f3f3f"

# Small hand-written catalogue: one midline region, two bilateral regions,
# one region with all three groups.
MINI_CATALOGUE = (
    RegionDefinition(slug="head", path=RegionPath(common=("M0 0 L10 0 L10 10 Z",))),
    RegionDefinition(
        slug="biceps",
        path=RegionPath(left=("M20 20 L30 20 Z",), right=("M80 20 L70 20 Z",)),
    ),
    RegionDefinition(
        slug="chest",
        path=RegionPath(
            left=("M40 10 L50 10 Z", "M40 15 L50 15 Z"),
            right=("M60 10 L70 10 Z",),
        ),
    ),
    RegionDefinition(
        slug="abs",
        path=RegionPath(
            common=("M45 30 L55 30 Z",),
            left=("M45 40 L50 40 Z",),
            right=("M50 40 L55 40 Z",),
        ),
    ),
)


def make_config(**kwargs) -> RenderConfig:
    kwargs.setdefault("colors", RAMP)
    kwargs.setdefault("default_fill", DEFAULT_FILL)
    return RenderConfig.build(**kwargs)


@pytest.fixture
def catalogue() -> tuple[RegionDefinition, ...]:
    return MINI_CATALOGUE


@pytest.fixture
def config() -> RenderConfig:
    return make_config()
