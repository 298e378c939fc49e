"""
Build LinkAnnotation values from plain (JSON-shaped) mappings.

    {
        "rect": [llx, lly, urx, ury],
        "action": {"uri": "https://..."} | {"page": 0, "left": null, "top": 792, "zoom": null},
        "border": [r, g, b] | {"color": [r, g, b], "dash": [3, 2], "phase": 0},
        "color": [components...],        # 0, 1, 3 or 4 values
        "highlight": "I" | "invert",
    }

Only `rect` and `action` are required; the rest comes from the defaults.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from pdf_links.core.models.actions import Action, XYZ, go_to, open_uri
from pdf_links.core.models.geometry import Rect
from pdf_links.core.models.link_annotation import LinkAnnotation
from pdf_links.core.models.styles import (
    BorderStyle,
    DashPhase,
    Dashed,
    HighlightMode,
    Solid,
    color_from_components,
)
from pdf_links.core.services.link_defaults import DEFAULT_LINK_STYLE


def build_link_annotation(payload: Mapping, defaults: Mapping | None = None) -> LinkAnnotation:
    defaults = defaults or DEFAULT_LINK_STYLE
    if "rect" not in payload:
        raise ValueError("link payload needs a 'rect'")
    if "action" not in payload:
        raise ValueError("link payload needs an 'action'")

    border_raw = payload.get("border")
    color_raw = payload.get("color")
    highlight_raw = payload.get("highlight")
    return LinkAnnotation(
        rect=parse_rect(payload["rect"]),
        action=parse_action(payload["action"]),
        border=parse_border(border_raw if border_raw is not None else defaults.get("border", DEFAULT_LINK_STYLE["border"])),
        color=color_from_components(color_raw if color_raw is not None else defaults.get("color", DEFAULT_LINK_STYLE["color"])),
        highlight=HighlightMode.from_symbol(highlight_raw if highlight_raw is not None else defaults.get("highlight", "I")),
    )


def _numbers(raw, count: int, what: str) -> tuple[float, ...]:
    # strings are iterable, "1234" must not pass as four numbers
    if isinstance(raw, (str, bytes)):
        raise ValueError(f"{what} must be a list of {count} numbers, got {raw!r}")
    try:
        values = tuple(float(v) for v in raw)
    except (TypeError, ValueError):
        raise ValueError(f"{what} must be a list of {count} numbers, got {raw!r}") from None
    if len(values) != count:
        raise ValueError(f"{what} must be a list of {count} numbers, got {raw!r}")
    return values


def parse_rect(raw: Sequence) -> Rect:
    llx, lly, urx, ury = _numbers(raw, 4, "rect")
    return Rect.from_bounds(llx, lly, urx, ury)


def _rgb(raw) -> tuple[float, float, float]:
    r, g, b = _numbers(raw, 3, "border color")
    return (r, g, b)


def parse_border(raw) -> BorderStyle:
    if isinstance(raw, Mapping):
        color = _rgb(raw.get("color", DEFAULT_LINK_STYLE["border"]))
        dash = raw.get("dash")
        if dash is None:
            return Solid(color)
        if isinstance(dash, (str, bytes)):
            raise ValueError(f"invalid dash pattern: {raw!r}")
        try:
            dash_array = tuple(float(v) for v in dash)
            phase = float(raw.get("phase", 0.0) or 0.0)
        except (TypeError, ValueError):
            raise ValueError(f"invalid dash pattern: {raw!r}") from None
        return Dashed(color, DashPhase(dash_array, phase))
    return Solid(_rgb(raw))


def _optional_float(raw: Mapping, key: str) -> float | None:
    value = raw.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"destination '{key}' must be a number, got {value!r}") from None


def parse_action(raw: Mapping) -> Action:
    if not isinstance(raw, Mapping):
        raise ValueError(f"action must be a mapping, got {raw!r}")
    if "uri" in raw:
        uri = raw["uri"]
        if not isinstance(uri, str):
            raise ValueError(f"action uri must be a string, got {uri!r}")
        return open_uri(uri)
    if "page" in raw:
        page = raw["page"]
        if isinstance(page, bool) or not isinstance(page, int) or page < 0:
            raise ValueError(f"destination page must be a non-negative integer, got {page!r}")
        return go_to(
            XYZ(
                page=page,
                left=_optional_float(raw, "left"),
                top=_optional_float(raw, "top"),
                zoom=_optional_float(raw, "zoom"),
            )
        )
    raise ValueError(f"action needs either 'uri' or 'page': {raw!r}")
