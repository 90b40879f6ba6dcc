"""Render configuration — everything a single render call depends on."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

# Fill used for every segment of a disabled region
DISABLED_FILL = "#EBEBE4"


@dataclass(frozen=True)
class RenderConfig:
    """Immutable per-call configuration.

    ``colors`` is required: the engine carries no implicit ramp. The
    application-level fallback lives in ``bodymap.config.Settings``.
    """

    colors: tuple[str, ...]
    scale: float = 1.0
    side: str = "front"
    gender: str = "male"
    disabled_parts: frozenset[str] = field(default_factory=frozenset)
    hidden_parts: frozenset[str] = field(default_factory=frozenset)
    default_fill: str = "#3f3f3f"
    default_stroke: str = "none"
    default_stroke_width: float = 0.0
    border: str = "#dfdfdf"

    @classmethod
    def build(
        cls,
        colors: Sequence[str],
        disabled_parts: Iterable[str] = (),
        hidden_parts: Iterable[str] = (),
        **kwargs,
    ) -> RenderConfig:
        """Normalize list inputs into the frozen containers the engine expects."""
        return cls(
            colors=tuple(colors),
            disabled_parts=frozenset(disabled_parts),
            hidden_parts=frozenset(hidden_parts),
            **kwargs,
        )

    def ramp_color(self, intensity: int | None) -> str | None:
        return ramp_color(self.colors, intensity)


def ramp_color(colors: Sequence[str], intensity: int | None) -> str | None:
    """Color for a 1-based intensity, or None when absent or out of range."""
    if intensity is None or intensity < 1 or intensity > len(colors):
        return None
    return colors[intensity - 1]
