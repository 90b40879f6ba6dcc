"""Body renderer — configuration in, resolved segments and SVG out."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from bodymap.engine.config import RenderConfig
from bodymap.engine.dispatch import PressCallback, PressDispatcher
from bodymap.engine.emitter import Segment, render_segments
from bodymap.engine.view import WrapperView, select_catalogue, select_view
from bodymap.models.body import OverrideEntry
from bodymap.svg.serializer import serialize_body

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    segments: tuple[Segment, ...]
    view: WrapperView
    config: RenderConfig

    def to_svg(self) -> str:
        return serialize_body(
            self.segments,
            self.view,
            scale=self.config.scale,
            border=self.config.border,
        )


def render_body(overrides: Iterable[OverrideEntry], config: RenderConfig) -> RenderResult:
    """Resolve one render pass. Pure: the same inputs give the same result."""
    catalogue = select_catalogue(config.gender, config.side)
    view = select_view(config.gender, config.side)
    segments = tuple(render_segments(catalogue, overrides, config))

    logger.info(
        "Rendered %s/%s: %d segments, %d disabled, %d hidden",
        config.gender,
        config.side,
        len(segments),
        len(config.disabled_parts),
        len(config.hidden_parts),
    )
    return RenderResult(segments=segments, view=view, config=config)


class Body:
    """Highlighted body bound to a configuration and a press callback."""

    def __init__(self, config: RenderConfig, on_press: PressCallback | None = None) -> None:
        self.config = config
        self.dispatcher = PressDispatcher(on_press, disabled_parts=config.disabled_parts)

    def render(self, data: Iterable[OverrideEntry]) -> RenderResult:
        return render_body(data, self.config)

    def press(self, result: RenderResult, key: str) -> bool:
        """Deliver a press on the segment with ``key``. Raises KeyError if unknown."""
        return self.dispatcher.press_key(result.segments, key)
