from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from pdf_links.core.services.link_defaults import load_link_defaults
from pdf_links.core.services.link_payload import build_link_annotation
from pdf_links.core.services.registry import AnnotationHandle, AnnotationRegistry
from pdf_links.utils.pdf.core.builder import build_pdf_bytes
from pdf_links.utils.pdf.core.drawing import _draw_link_outline, _draw_link_underline, _draw_text
from pdf_links.utils.pdf.core.layout_common import (
    BODY_FONT,
    BODY_SIZE,
    HEADING_FONT,
    HEADING_SIZE,
    LEADING,
    MARGIN_TOP,
    MARGIN_X,
    PAGE_H,
    PAGE_W,
)

logger = logging.getLogger(__name__)


def render_pdf(path: Path, payload: Mapping) -> None:
    """
    High-level renderer: text pages with link annotations, written to `path`.
    """
    pdf_bytes = render_pdf_bytes(payload)
    Path(path).write_bytes(pdf_bytes)
    logger.debug("Wrote %d bytes to %s", len(pdf_bytes), path)


def render_pdf_bytes(payload: Mapping) -> bytes:
    """
    payload = {
        "page_size": [w, h],            # optional, A4 by default
        "defaults": "link_defaults.json",  # optional
        "pages": [{"title": "...", "lines": [...], "links": [<link payload>, ...]}],
    }
    """
    page_w, page_h = payload.get("page_size") or (PAGE_W, PAGE_H)
    defaults_path = payload.get("defaults")
    defaults = load_link_defaults(Path(defaults_path) if defaults_path else None)
    pages = list(payload.get("pages") or [])
    if not pages:
        raise ValueError("payload has no pages")

    registry = AnnotationRegistry()
    placements: dict[AnnotationHandle, int] = {}
    content_streams: list[str] = []

    for page_index, page in enumerate(pages):
        parts: list[str] = []
        y = page_h - MARGIN_TOP
        title = page.get("title")
        if title:
            parts.append(_draw_text([title], MARGIN_X, y, HEADING_FONT, HEADING_SIZE))
            y -= HEADING_SIZE + LEADING
        lines = page.get("lines") or []
        if lines:
            parts.append(_draw_text(lines, MARGIN_X, y, BODY_FONT, BODY_SIZE, LEADING))

        for link_payload in page.get("links") or []:
            annotation = build_link_annotation(link_payload, defaults)
            handle = registry.register(annotation)
            placements[handle] = page_index
            if link_payload.get("outline", False):
                parts.append(_draw_link_outline(annotation.rect))
            elif link_payload.get("underline", True):
                parts.append(_draw_link_underline(annotation.rect))
        content_streams.append("".join(parts))

    return build_pdf_bytes(content_streams, page_size=(page_w, page_h), registry=registry, placements=placements)
