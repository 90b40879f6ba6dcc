"""BodyMap merge and style-resolution engine."""

from bodymap.engine.body import Body, RenderResult, render_body
from bodymap.engine.config import DISABLED_FILL, RenderConfig
from bodymap.engine.dispatch import PressDispatcher
from bodymap.engine.emitter import Segment, emit_segments, render_segments
from bodymap.engine.merge import merge_body_parts
from bodymap.engine.style import resolve_fill, resolve_part_styles
from bodymap.engine.view import select_catalogue, select_view

__all__ = [
    "Body",
    "RenderResult",
    "render_body",
    "DISABLED_FILL",
    "RenderConfig",
    "PressDispatcher",
    "Segment",
    "emit_segments",
    "render_segments",
    "merge_body_parts",
    "resolve_fill",
    "resolve_part_styles",
    "select_catalogue",
    "select_view",
]
