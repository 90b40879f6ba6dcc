"""Tests for the static catalogues."""

from __future__ import annotations

import pytest

from bodymap.assets import body_back, body_female_back, body_female_front, body_front, load_catalogue
from bodymap.models.body import SLUGS

ALL = [body_front, body_back, body_female_front, body_female_back]


@pytest.mark.parametrize("catalogue", ALL)
def test_slugs_unique_and_known(catalogue):
    slugs = [p.slug for p in catalogue]
    assert len(slugs) == len(set(slugs))
    assert set(slugs) <= set(SLUGS)


@pytest.mark.parametrize("catalogue", ALL)
def test_every_region_has_geometry(catalogue):
    for part in catalogue:
        assert part.path.common or part.path.left or part.path.right


@pytest.mark.parametrize("catalogue", ALL)
def test_bilateral_regions_have_both_sides(catalogue):
    for part in catalogue:
        assert bool(part.path.left) == bool(part.path.right)
        assert len(part.path.left) == len(part.path.right)


def test_catalogue_entries_are_frozen():
    with pytest.raises(Exception):
        body_front[0].slug = "other"


def test_load_catalogue_rejects_duplicate_slugs():
    records = [
        {"slug": "head", "path": {"common": ["M0 0 Z"]}},
        {"slug": "head", "path": {"common": ["M1 1 Z"]}},
    ]
    with pytest.raises(ValueError):
        load_catalogue(records)


def test_load_catalogue_defaults_missing_groups():
    (part,) = load_catalogue([{"slug": "neck", "path": {"left": ["M0 0 Z"]}}])
    assert part.path.common == ()
    assert part.path.right == ()
    assert part.path.left == ("M0 0 Z",)
