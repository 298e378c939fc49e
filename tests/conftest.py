import sys
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def page_context():
    from pdf_links.core.models.context import ResolutionContext

    return ResolutionContext({0: (5, 0), 1: (7, 0)})


@pytest.fixture
def sample_link():
    from pdf_links.core.models.actions import XYZ, go_to
    from pdf_links.core.models.geometry import Rect
    from pdf_links.core.models.link_annotation import LinkAnnotation

    return LinkAnnotation.new(
        Rect.from_bounds(0, 0, 100, 50),
        None,
        None,
        go_to(XYZ(page=0, top=792.0)),
        None,
    )


@pytest.fixture
def uri_link():
    from pdf_links.core.models.actions import open_uri
    from pdf_links.core.models.geometry import Rect
    from pdf_links.core.models.link_annotation import LinkAnnotation

    return LinkAnnotation(rect=Rect.from_bounds(10, 700, 200, 715), action=open_uri("https://example.com"))


@pytest.fixture
def two_page_payload():
    return {
        "pages": [
            {
                "title": "Contents",
                "lines": ["Chapter 1 ........ 2", "Project site"],
                "links": [
                    {"rect": [56, 760, 300, 772], "action": {"page": 1, "top": 792}},
                    {"rect": [56, 745, 160, 757], "action": {"uri": "https://example.com"}},
                ],
            },
            {
                "title": "Chapter 1",
                "lines": ["Back to contents"],
                "links": [{"rect": [56, 760, 200, 772], "action": {"page": 0}}],
            },
        ]
    }
