import logging

import pytest

from pdf_links.core.errors import RegistryClosedError, UnresolvedPageError
from pdf_links.core.models.actions import XYZ, go_to
from pdf_links.core.models.context import ResolutionContext
from pdf_links.core.models.geometry import Rect
from pdf_links.core.models.link_annotation import LinkAnnotation
from pdf_links.core.models.objects import PdfReference
from pdf_links.core.services.registry import AnnotationHandle, AnnotationRegistry


def _link_to(page, x=0):
    return LinkAnnotation(rect=Rect.from_bounds(x, 0, x + 10, 10), action=go_to(XYZ(page=page)))


def test_register_issues_sequential_names(sample_link):
    registry = AnnotationRegistry()

    handles = [registry.register(sample_link) for _ in range(5)]

    assert [h.name for h in handles] == ["PT0", "PT1", "PT2", "PT3", "PT4"]
    assert len(set(handles)) == 5
    assert len(registry) == 5


def test_names_do_not_depend_on_interleaved_encoding(sample_link, page_context):
    registry = AnnotationRegistry()
    first = registry.register(sample_link)
    registry.encode_all(page_context)
    second = registry.register(sample_link)

    assert (first.name, second.name) == ("PT0", "PT1")


def test_lookup_by_handle_or_name(sample_link, uri_link):
    registry = AnnotationRegistry()
    registry.register(sample_link)
    handle = registry.register(uri_link)

    assert registry.get(handle) is uri_link
    assert registry.get("PT0") is sample_link
    assert "PT1" in registry
    assert AnnotationHandle("PT7") not in registry
    assert [(h.name, a) for h, a in registry] == [("PT0", sample_link), ("PT1", uri_link)]


def test_encode_all_in_issue_order(uri_link, page_context):
    registry = AnnotationRegistry()
    registry.register(_link_to(1))
    registry.register(uri_link)

    encoded = registry.encode_all(page_context)

    assert [h.name for h, _ in encoded] == ["PT0", "PT1"]
    assert encoded[0][1]["A"]["D"][0] == PdfReference(7, 0)
    assert encoded[1][1]["A"]["S"] == "URI"


def test_encode_all_fails_on_first_unresolved_page(page_context, caplog):
    registry = AnnotationRegistry()
    registry.register(_link_to(0))
    registry.register(_link_to(4))
    registry.register(_link_to(1))

    with caplog.at_level(logging.ERROR):
        with pytest.raises(UnresolvedPageError) as excinfo:
            registry.encode_all(page_context)

    assert excinfo.value.page_index == 4
    assert excinfo.value.handle == "PT1"
    assert "PT1" in str(excinfo.value)
    assert "PT1" in caplog.text


def test_encode_one_isolates_failures(page_context):
    registry = AnnotationRegistry()
    good = registry.register(_link_to(0))
    bad = registry.register(_link_to(4))

    assert registry.encode_one(good, page_context)["Subtype"] == "Link"
    with pytest.raises(UnresolvedPageError):
        registry.encode_one(bad, page_context)


def test_each_pass_uses_its_own_context():
    registry = AnnotationRegistry()
    registry.register(_link_to(0))

    first = registry.encode_all(ResolutionContext({0: (5, 0)}))
    second = registry.encode_all(ResolutionContext({0: (40, 1)}))

    assert first[0][1]["A"]["D"][0] == PdfReference(5, 0)
    assert second[0][1]["A"]["D"][0] == PdfReference(40, 1)


def test_closed_registry_rejects_registration(sample_link):
    registry = AnnotationRegistry()
    registry.register(sample_link)
    registry.close()

    assert not registry.is_open
    with pytest.raises(RegistryClosedError):
        registry.register(sample_link)
    assert len(registry) == 1


def test_collapsed_dictionary_keeps_only_first_rectangle():
    # Legacy single-dictionary form: a known narrowing, not the real output.
    registry = AnnotationRegistry()
    registry.register(_link_to(0, x=0))
    registry.register(_link_to(1, x=50))

    collapsed = registry.collapsed_dictionary()

    assert collapsed == {"Type": "Annot", "Subtype": "Link", "Rect": [0, 0, 10, 10]}
    assert "A" not in collapsed


def test_collapsed_dictionary_of_empty_registry():
    assert AnnotationRegistry().collapsed_dictionary() == {}
