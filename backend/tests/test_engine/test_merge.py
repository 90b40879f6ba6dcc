"""Tests for the merge engine."""

from __future__ import annotations

from bodymap.engine.merge import index_overrides, merge_body_parts
from bodymap.models.body import BodyPartStyles, OverrideEntry
from tests.conftest import MINI_CATALOGUE, RAMP


def _by_slug(regions):
    return {r.slug: r for r in regions}


def test_no_overrides_passes_catalogue_through():
    merged = merge_body_parts(MINI_CATALOGUE, [], colors=RAMP)
    assert [r.slug for r in merged] == ["head", "biceps", "chest", "abs"]
    for region, part in zip(merged, MINI_CATALOGUE):
        assert region.path == part.path
        assert region.color is None
        assert region.intensity is None
        assert region.side is None
        assert region.styles is None


def test_hidden_parts_are_dropped():
    overrides = [OverrideEntry(slug="chest", color="#ff0000")]
    merged = merge_body_parts(MINI_CATALOGUE, overrides, hidden={"chest", "head"}, colors=RAMP)
    assert [r.slug for r in merged] == ["biceps", "abs"]


def test_override_fields_attached_and_path_kept():
    styles = BodyPartStyles(stroke="#000")
    overrides = [OverrideEntry(slug="biceps", color="#123456", intensity=1, side="left", styles=styles)]
    region = _by_slug(merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP))["biceps"]
    assert region.color == "#123456"
    assert region.intensity == 1
    assert region.side == "left"
    assert region.styles == styles
    assert region.path == MINI_CATALOGUE[1].path


def test_intensity_derives_color():
    overrides = [OverrideEntry(slug="biceps", intensity=2)]
    region = _by_slug(merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP))["biceps"]
    assert region.color == "#74b9ff"
    assert region.styles is None


def test_intensity_does_not_override_explicit_color():
    overrides = [OverrideEntry(slug="biceps", intensity=2, color="#abcdef")]
    region = _by_slug(merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP))["biceps"]
    assert region.color == "#abcdef"


def test_style_fill_blocks_derived_color():
    overrides = [OverrideEntry(slug="biceps", intensity=1, styles=BodyPartStyles(fill="#00ff00"))]
    region = _by_slug(merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP))["biceps"]
    assert region.color is None
    assert region.styles.fill == "#00ff00"


def test_out_of_range_intensity_leaves_color_unset():
    overrides = [
        OverrideEntry(slug="biceps", intensity=5),
        OverrideEntry(slug="chest", intensity=0),
        OverrideEntry(slug="abs", intensity=-1),
    ]
    merged = _by_slug(merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP))
    assert merged["biceps"].color is None
    assert merged["chest"].color is None
    # -1 must not wrap around to the end of the ramp
    assert merged["abs"].color is None


def test_unknown_slug_is_ignored():
    overrides = [OverrideEntry(slug="wings", color="#ff0000")]
    merged = merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP)
    assert [r.slug for r in merged] == ["head", "biceps", "chest", "abs"]
    assert all(r.color is None for r in merged)


def test_entry_without_slug_is_ignored():
    lookup = index_overrides([OverrideEntry(color="#ff0000")])
    assert lookup == {}


def test_duplicate_overrides_last_wins():
    overrides = [
        OverrideEntry(slug="chest", color="#111111"),
        OverrideEntry(slug="chest", color="#222222"),
    ]
    region = _by_slug(merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP))["chest"]
    assert region.color == "#222222"


def test_merge_returns_new_list_and_leaves_catalogue_untouched():
    before = [part.model_copy(deep=True) for part in MINI_CATALOGUE]
    overrides = [OverrideEntry(slug="head", color="#ff0000")]
    first = merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP)
    second = merge_body_parts(MINI_CATALOGUE, overrides, colors=RAMP)
    assert first == second
    assert first is not second
    assert list(MINI_CATALOGUE) == before
