"""Press dispatch — route a user press on a segment to the caller's callback."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from bodymap.engine.emitter import Segment
from bodymap.models.body import BodySide, EnrichedRegion

logger = logging.getLogger(__name__)

PressCallback = Callable[[EnrichedRegion, BodySide | None], None]


def find_segment(segments: Sequence[Segment], key: str) -> Segment:
    """Look a segment up by its key. Raises KeyError for unknown keys."""
    for segment in segments:
        if segment.key == key:
            return segment
    raise KeyError(key)


class PressDispatcher:
    """Single dispatch point for presses, parameterized by (region, side)."""

    def __init__(
        self,
        on_press: PressCallback | None = None,
        disabled_parts: Iterable[str] = (),
    ) -> None:
        self.on_press = on_press
        self.disabled_parts = frozenset(disabled_parts)

    def dispatch(self, region: EnrichedRegion, side: BodySide | None = None) -> bool:
        """Invoke the callback once. Returns False when nothing was called."""
        if self.on_press is None or region.slug in self.disabled_parts:
            return False
        self.on_press(region, side)
        return True

    def press(self, segment: Segment) -> bool:
        """Route a press on a segment. Disabled segments carry no binding."""
        if segment.region is None:
            logger.debug("Press on disabled segment %s ignored", segment.key)
            return False
        return self.dispatch(segment.region, segment.side)

    def press_key(self, segments: Sequence[Segment], key: str) -> bool:
        return self.press(find_segment(segments, key))
