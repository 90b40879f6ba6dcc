"""Write SVG output for a resolved body: scaled, bordered wrapper around the segments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bodymap.engine.emitter import Segment
    from bodymap.engine.view import WrapperView

# Sentinel border value that suppresses the frame
NO_BORDER = "none"


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def _attr_str(attrs: dict[str, Any]) -> str:
    parts = []
    for k, v in attrs.items():
        safe_v = (
            str(v)
            .replace("&", "&amp;")
            .replace('"', "&quot;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
        )
        parts.append(f'{k}="{safe_v}"')
    return " ".join(parts)


def segment_to_element(segment: Segment) -> dict[str, Any]:
    """Attribute dict for one segment, in drawing order."""
    return {
        "tag": "path",
        "id": segment.slug,
        "data-key": segment.key,
        "fill": segment.fill,
        "stroke": segment.stroke,
        "stroke-width": _fmt_number(segment.stroke_width),
        "style": f"cursor: {segment.cursor}; opacity: {_fmt_number(segment.opacity)}",
        "aria-disabled": "true" if segment.aria_disabled else "false",
        "d": segment.d,
    }


def serialize_body(
    segments: Sequence[Segment],
    view: WrapperView,
    scale: float = 1.0,
    border: str = NO_BORDER,
) -> str:
    """Generate SVG markup hosting the segments inside the wrapper view."""
    width, height = view.scaled(scale)
    vb = " ".join(_fmt_number(v) for v in view.view_box)

    lines = [
        f'<svg width="{_fmt_number(width)}" height="{_fmt_number(height)}" viewBox="{vb}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if border and border != NO_BORDER:
        x, y, w, h = view.view_box
        frame = {
            "x": _fmt_number(x + 2),
            "y": _fmt_number(y + 2),
            "width": _fmt_number(w - 4),
            "height": _fmt_number(h - 4),
            "rx": "24",
            "fill": "none",
            "stroke": border,
            "stroke-width": "2",
        }
        lines.append(f"  <rect {_attr_str(frame)} />")

    for segment in segments:
        elem = segment_to_element(segment)
        tag = elem.pop("tag")
        lines.append(f"  <{tag} {_attr_str(elem)} />")

    lines.append("</svg>")
    return "\n".join(lines)
