"""View selection — pick the catalogue and wrapper geometry for gender/side."""

from __future__ import annotations

from dataclasses import dataclass

from bodymap.assets import Catalogue, body_back, body_female_back, body_female_front, body_front


@dataclass(frozen=True)
class WrapperView:
    """Container geometry at scale 1."""

    view_box: tuple[float, float, float, float]
    width: float
    height: float

    def scaled(self, scale: float) -> tuple[float, float]:
        return (round(self.width * scale, 2), round(self.height * scale, 2))


_CATALOGUES: dict[tuple[str, str], Catalogue] = {
    ("male", "front"): body_front,
    ("male", "back"): body_back,
    ("female", "front"): body_female_front,
    ("female", "back"): body_female_back,
}

_VIEWS: dict[tuple[str, str], WrapperView] = {
    ("male", "front"): WrapperView(view_box=(0.0, 0.0, 724.0, 1100.0), width=200.0, height=304.0),
    ("male", "back"): WrapperView(view_box=(0.0, 0.0, 724.0, 1100.0), width=200.0, height=304.0),
    ("female", "front"): WrapperView(view_box=(40.0, 0.0, 644.0, 1100.0), width=178.0, height=304.0),
    ("female", "back"): WrapperView(view_box=(40.0, 0.0, 644.0, 1100.0), width=178.0, height=304.0),
}


def _check(gender: str, side: str) -> tuple[str, str]:
    if gender not in ("male", "female"):
        raise ValueError(f"Unknown gender {gender!r}, expected 'male' or 'female'")
    if side not in ("front", "back"):
        raise ValueError(f"Unknown side {side!r}, expected 'front' or 'back'")
    return (gender, side)


def select_catalogue(gender: str, side: str) -> Catalogue:
    return _CATALOGUES[_check(gender, side)]


def select_view(gender: str, side: str) -> WrapperView:
    return _VIEWS[_check(gender, side)]
