import pytest

from pdf_links.core.errors import UnresolvedPageError
from pdf_links.core.services.registry import AnnotationRegistry
from pdf_links.utils.pdf.core.builder import build_pdf_bytes
from pdf_links.utils.pdf.renderers import pdf_renderer


def _startxref(data: bytes) -> int:
    return int(data.split(b"startxref\n")[1].split(b"\n")[0])


def test_build_without_annotations_creates_valid_pdf():
    data = build_pdf_bytes(["BT /F1 12 Tf 10 10 Td (Hi) Tj ET\n"])

    assert data.startswith(b"%PDF")
    assert data[_startxref(data) : _startxref(data) + 4] == b"xref"
    assert b"/Annots" not in data
    assert b"/Count 1" in data


def test_goto_destinations_point_at_page_objects(sample_link, uri_link):
    registry = AnnotationRegistry()
    to_first = registry.register(sample_link)
    external = registry.register(uri_link)

    data = build_pdf_bytes(["", ""], registry=registry, placements={to_first: 1, external.name: 0})

    # pages are objects 6 and 8, annotations follow as 9 and 10
    assert b"/D [6 0 R /XYZ null 792 null]" in data
    assert b"6 0 obj << /Type /Page" in data
    assert b"/Annots [10 0 R]" in data
    assert b"/Annots [9 0 R]" in data
    assert b"/NM (PT0)" in data
    assert b"/URI (https://example.com)" in data
    assert not registry.is_open


def test_xref_offsets_match_objects(sample_link):
    registry = AnnotationRegistry()
    handle = registry.register(sample_link)

    data = build_pdf_bytes(["", ""], registry=registry, placements={handle: 0})

    xref = data[_startxref(data) :].split(b"\n")
    count = int(xref[1].split()[1])
    for obj_id in range(1, count):
        offset = int(xref[2 + obj_id].split()[0])
        assert data[offset:].startswith(f"{obj_id} 0 obj".encode("ascii"))


def test_missing_placement_is_rejected(sample_link):
    registry = AnnotationRegistry()
    registry.register(sample_link)

    with pytest.raises(ValueError):
        build_pdf_bytes([""], registry=registry, placements={})


def test_placement_outside_document_is_rejected(sample_link):
    registry = AnnotationRegistry()
    handle = registry.register(sample_link)

    with pytest.raises(ValueError):
        build_pdf_bytes([""], registry=registry, placements={handle: 3})


def test_non_integer_placement_is_rejected(sample_link):
    registry = AnnotationRegistry()
    handle = registry.register(sample_link)

    with pytest.raises(ValueError):
        build_pdf_bytes([""], registry=registry, placements={handle: "0"})
    with pytest.raises(ValueError):
        build_pdf_bytes([""], registry=registry, placements={handle: True})


def test_render_two_page_document(tmp_path, two_page_payload):
    out_path = tmp_path / "links.pdf"

    pdf_renderer.render_pdf(out_path, two_page_payload)

    data = out_path.read_bytes()
    assert data.startswith(b"%PDF")
    assert b"/Count 2" in data
    assert b"/D [8 0 R /XYZ null 792 null]" in data
    assert b"/D [6 0 R /XYZ null null null]" in data
    assert b"/Annots [9 0 R 10 0 R]" in data
    assert b"/Annots [11 0 R]" in data
    assert b"(Chapter 1) Tj" in data
    assert b"56.00 760.00 m 300.00 760.00 l S" in data


def test_render_link_to_missing_page_fails(two_page_payload):
    two_page_payload["pages"][1]["links"].append({"rect": [0, 0, 1, 1], "action": {"page": 5}})

    with pytest.raises(UnresolvedPageError) as excinfo:
        pdf_renderer.render_pdf_bytes(two_page_payload)

    assert excinfo.value.page_index == 5
    assert excinfo.value.handle == "PT3"


def test_render_without_pages_is_rejected():
    with pytest.raises(ValueError):
        pdf_renderer.render_pdf_bytes({"pages": []})


def test_render_uses_defaults_file(tmp_path, two_page_payload):
    defaults = tmp_path / "defaults.json"
    defaults.write_text('{"highlight": "P", "color": []}', encoding="utf-8")
    two_page_payload["defaults"] = str(defaults)

    data = pdf_renderer.render_pdf_bytes(two_page_payload)

    assert b"/H /P" in data
    assert b"/C []" in data
    assert b"/H /I" not in data


def test_render_draws_outline_when_requested(two_page_payload):
    two_page_payload["pages"][0]["links"][0]["outline"] = True

    data = pdf_renderer.render_pdf_bytes(two_page_payload)

    assert b"56.0 760.0 244.0 12.0 re S" in data
    assert b"56.00 760.00 m 300.00 760.00 l S" not in data
    # the other links keep their underline
    assert b"56.00 745.00 m 160.00 745.00 l S" in data
