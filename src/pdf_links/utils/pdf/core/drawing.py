from __future__ import annotations

import unicodedata
from typing import Iterable

from pdf_links.core.models.geometry import Rect
from pdf_links.utils.pdf.core.layout_common import LINK_UNDERLINE_WIDTH, color


def _normalize_ascii(text: str) -> str:
    """Remove diacritics to stay compatible with built-in PDF Type1 fonts."""
    normalized = unicodedata.normalize("NFKD", str(text))
    return normalized.encode("ascii", "ignore").decode("ascii")


def _escape_pdf_text(text: str) -> str:
    ascii_text = _normalize_ascii(text)
    return ascii_text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _draw_text(lines: Iterable[str], x: float, y: float, font: str, size: int, leading: int | None = None) -> str:
    out = []
    spacing = leading or (size + 2)
    for line in lines:
        safe = _escape_pdf_text(str(line))
        out.append(f"BT {font} {size} Tf {x} {y} Td ({safe}) Tj ET\n")
        y -= spacing
    return "".join(out)


def _draw_link_underline(rect: Rect) -> str:
    """Thin line along the bottom edge of a link region, in the link color."""
    x0, y0, x1, _ = rect.as_array()
    return (
        f"q {color('link')} RG {LINK_UNDERLINE_WIDTH} w "
        f"{x0:.2f} {y0:.2f} m {x1:.2f} {y0:.2f} l S Q\n"
    )


def _draw_rect(x: float, y: float, w: float, h: float, stroke: bool = True, fill: bool = False) -> str:
    if fill and stroke:
        op = "B"
    elif fill:
        op = "f"
    else:
        op = "S"
    return f"{x} {y} {w} {h} re {op}\n"


def _draw_link_outline(rect: Rect) -> str:
    """Stroked box around a link region, in the link color."""
    x0, y0, x1, y1 = rect.as_array()
    box = _draw_rect(round(x0, 2), round(y0, 2), round(x1 - x0, 2), round(y1 - y0, 2), stroke=True)
    return f"q {color('link')} RG {LINK_UNDERLINE_WIDTH} w " + box + "Q\n"
