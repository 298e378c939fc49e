"""
PDF object builder: assembles content streams and link annotations into a minimal PDF byte output.

Page objects are numbered first. Their identities form the ResolutionContext
the registry is encoded against, so GoTo destinations point at real page objects.
"""

from __future__ import annotations

import logging
from typing import List, Mapping

from pdf_links.core.models.context import ResolutionContext
from pdf_links.core.models.objects import PdfName, PdfReference, PdfString
from pdf_links.core.services.registry import AnnotationHandle, AnnotationRegistry
from pdf_links.utils.pdf.core.serializer import serialize_indirect, serialize_stream

logger = logging.getLogger(__name__)

CATALOG_ID = 1
PAGES_ID = 2
FONT_REGULAR_ID = 3
FONT_BOLD_ID = 4
FIRST_FREE_ID = 5


def build_pdf_bytes(
    content_streams: List[str],
    page_size=(595, 842),
    registry: AnnotationRegistry | None = None,
    placements: Mapping[AnnotationHandle | str, int] | None = None,
) -> bytes:
    """
    Given list of page content streams (str), return ready-to-write PDF bytes.

    `placements` maps every handle in `registry` to the index of the page whose
    /Annots array lists it. The registry is closed once encoded.
    """
    streams_bytes = [s.encode("ascii", "ignore") for s in content_streams]
    next_obj_id = FIRST_FREE_ID

    content_ids: list[int] = []
    page_ids: list[int] = []
    for _ in streams_bytes:
        content_ids.append(next_obj_id)
        page_ids.append(next_obj_id + 1)
        next_obj_id += 2

    page_annots: dict[int, list[PdfReference]] = {i: [] for i in range(len(page_ids))}
    annot_objs: list[bytes] = []
    if registry is not None:
        page_of = _resolve_placements(registry, placements or {}, len(page_ids))
        ctx = ResolutionContext({index: (obj_id, 0) for index, obj_id in enumerate(page_ids)})
        for handle, annot in registry.encode_all(ctx):
            page_index = page_of[handle.name]
            annot["P"] = PdfReference(page_ids[page_index], 0)
            annot["NM"] = PdfString.literal(handle.name)
            annot_objs.append(serialize_indirect(next_obj_id, annot))
            page_annots[page_index].append(PdfReference(next_obj_id, 0))
            next_obj_id += 1
        registry.close()
        logger.debug("Attached %d link annotations to %d pages", len(annot_objs), len(page_ids))

    font_objs = [
        serialize_indirect(FONT_REGULAR_ID, {"Type": PdfName("Font"), "Subtype": PdfName("Type1"), "BaseFont": PdfName("Helvetica")}),
        serialize_indirect(FONT_BOLD_ID, {"Type": PdfName("Font"), "Subtype": PdfName("Type1"), "BaseFont": PdfName("Helvetica-Bold")}),
    ]
    resources = {
        "Font": {
            "F1": PdfReference(FONT_REGULAR_ID, 0),
            "F2": PdfReference(FONT_BOLD_ID, 0),
        }
    }

    page_objs: list[bytes] = []
    for index, (stream, content_id, page_id) in enumerate(zip(streams_bytes, content_ids, page_ids)):
        page = {
            "Type": PdfName("Page"),
            "Parent": PdfReference(PAGES_ID, 0),
            "MediaBox": [0, 0, page_size[0], page_size[1]],
            "Contents": PdfReference(content_id, 0),
            "Resources": resources,
        }
        if page_annots[index]:
            page["Annots"] = page_annots[index]
        page_objs.append(serialize_stream(content_id, stream))
        page_objs.append(serialize_indirect(page_id, page))

    pages_obj = serialize_indirect(
        PAGES_ID,
        {"Type": PdfName("Pages"), "Count": len(page_ids), "Kids": [PdfReference(kid, 0) for kid in page_ids]},
    )
    catalog_obj = serialize_indirect(CATALOG_ID, {"Type": PdfName("Catalog"), "Pages": PdfReference(PAGES_ID, 0)})

    # objects are written in id order so the xref table lines up
    objs = [catalog_obj, pages_obj] + font_objs + page_objs + annot_objs

    header = b"%PDF-1.4\n"
    offsets = [0]
    pdf_body = bytearray()
    current_offset = len(header)
    for obj in objs:
        offsets.append(current_offset)
        pdf_body += obj
        current_offset += len(obj)

    xref_entries = ["0000000000 65535 f \n"] + [_format_xref_entry(off) for off in offsets[1:]]
    xref = ("xref\n0 %d\n" % len(offsets)).encode("ascii") + "".join(xref_entries).encode("ascii")
    startxref = len(header) + len(pdf_body)
    trailer = f"trailer << /Size {len(offsets)} /Root {CATALOG_ID} 0 R >>\nstartxref\n{startxref}\n%%EOF\n".encode("ascii")

    return header + bytes(pdf_body) + xref + trailer


def _resolve_placements(
    registry: AnnotationRegistry,
    placements: Mapping[AnnotationHandle | str, int],
    page_count: int,
) -> dict[str, int]:
    by_name = {str(handle): page for handle, page in placements.items()}
    page_of: dict[str, int] = {}
    for handle in registry.handles():
        if handle.name not in by_name:
            raise ValueError(f"link annotation {handle.name} has no page placement")
        page = by_name[handle.name]
        if isinstance(page, bool) or not isinstance(page, int):
            raise ValueError(f"link annotation {handle.name} placement must be a page index, got {page!r}")
        if not 0 <= page < page_count:
            raise ValueError(f"link annotation {handle.name} placed on page {page}, document has {page_count} pages")
        page_of[handle.name] = page
    return page_of


def _format_xref_entry(offset: int) -> str:
    return f"{offset:010d} 00000 n \n"
