"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from bodymap.engine.config import DISABLED_FILL
from bodymap.main import app


client = TestClient(app)


def _segments(data, **body):
    response = client.post("/api/render", json={"data": data, **body})
    assert response.status_code == 200
    return response.json()["segments"]


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert set(data["catalogue_sizes"]) == {"male/front", "male/back", "female/front", "female/back"}
    assert all(n > 0 for n in data["catalogue_sizes"].values())


def test_slugs():
    response = client.get("/api/slugs")
    assert response.status_code == 200
    data = response.json()
    assert "biceps" in data["male/front"]
    assert "upper-back" in data["male/back"]


def test_render_defaults_from_settings():
    response = client.post("/api/render", json={"data": [{"slug": "biceps", "intensity": 2}]})
    assert response.status_code == 200
    data = response.json()
    assert data["gender"] == "male"
    assert data["side"] == "front"
    assert data["svg"].startswith("<svg")
    biceps = [s for s in data["segments"] if s["slug"] == "biceps"]
    assert {s["fill"] for s in biceps} == {"#74b9ff"}
    others = [s for s in data["segments"] if s["slug"] == "chest"]
    assert {s["fill"] for s in others} == {"#3f3f3f"}


def test_render_custom_ramp_and_defaults():
    segments = _segments(
        [{"slug": "chest", "intensity": 1}],
        colors=["#111111"],
        default_fill="#eeeeee",
        default_stroke="#000000",
        default_stroke_width=1,
    )
    chest = [s for s in segments if s["slug"] == "chest"]
    assert {s["fill"] for s in chest} == {"#111111"}
    assert {s["stroke"] for s in segments} == {"#000000"}
    head = [s for s in segments if s["slug"] == "head"]
    assert {s["fill"] for s in head} == {"#eeeeee"}


def test_render_disabled_and_hidden():
    segments = _segments(
        [{"slug": "chest", "color": "#ff0000"}, {"slug": "abs", "color": "#00ff00"}],
        disabled_parts=["chest"],
        hidden_parts=["abs"],
    )
    chest = [s for s in segments if s["slug"] == "chest"]
    assert {s["fill"] for s in chest} == {DISABLED_FILL}
    assert not any(s["pressable"] for s in chest)
    assert all(s["aria_disabled"] for s in chest)
    assert not any(s["slug"] == "abs" for s in segments)


def test_render_side_restriction():
    segments = _segments([{"slug": "biceps", "color": "#ff0000", "side": "left"}])
    fills = {s["side"]: s["fill"] for s in segments if s["slug"] == "biceps"}
    assert fills == {"left": "#ff0000", "right": "#3f3f3f"}


def test_render_scale_and_border():
    response = client.post("/api/render", json={"data": [], "scale": 2, "border": "none"})
    data = response.json()
    assert data["width"] == 400
    assert "<rect" not in data["svg"]


def test_render_rejects_bad_inputs():
    assert client.post("/api/render", json={"data": [], "gender": "robot"}).status_code == 422
    assert client.post("/api/render", json={"data": [], "side": "top"}).status_code == 422
    assert client.post("/api/render", json={"data": [], "scale": 0}).status_code == 422


def test_render_unknown_slug_is_ignored():
    response = client.post("/api/render", json={"data": [{"slug": "wings", "color": "#ff0000"}]})
    assert response.status_code == 200
    assert all(s["fill"] != "#ff0000" for s in response.json()["segments"])


def test_render_svg_media_type():
    response = client.post("/api/render/svg", json={"data": [], "gender": "female", "side": "back"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert 'id="hair"' in response.text


def test_press_dispatches_region_and_side():
    response = client.post(
        "/api/press",
        json={"data": [{"slug": "biceps", "intensity": 1}], "key": "biceps-right-0"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["dispatched"] is True
    assert data["slug"] == "biceps"
    assert data["side"] == "right"
    assert data["region"]["intensity"] == 1
    assert data["region"]["color"] == "#0984e3"


def test_press_common_segment_has_no_side():
    response = client.post("/api/press", json={"data": [], "key": "head-common-0"})
    data = response.json()
    assert data["dispatched"] is True
    assert data["side"] is None


def test_press_disabled_is_not_dispatched():
    response = client.post(
        "/api/press",
        json={"data": [{"slug": "chest", "color": "#ff0000"}], "disabled_parts": ["chest"], "key": "chest-left-0"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["dispatched"] is False
    assert data["region"] is None


def test_press_unknown_key():
    response = client.post("/api/press", json={"data": [], "key": "wings-left-0"})
    assert response.status_code == 404
