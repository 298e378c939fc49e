from __future__ import annotations

from dataclasses import dataclass, field

from pdf_links.core.models.actions import Action, encode_action
from pdf_links.core.models.context import ResolutionContext
from pdf_links.core.models.geometry import Rect
from pdf_links.core.models.objects import PdfName
from pdf_links.core.models.styles import (
    BorderStyle,
    ColorValue,
    HighlightMode,
    default_border,
    default_color,
    encode_border,
    encode_color,
    encode_highlight,
)


@dataclass(frozen=True)
class LinkAnnotation:
    """A clickable page region plus what clicking it does."""

    rect: Rect
    action: Action
    border: BorderStyle = field(default_factory=default_border)
    color: ColorValue = field(default_factory=default_color)
    highlight: HighlightMode = HighlightMode.INVERT

    @classmethod
    def new(
        cls,
        rect: Rect,
        border: BorderStyle | None,
        color: ColorValue | None,
        action: Action,
        highlight: HighlightMode | None,
    ) -> "LinkAnnotation":
        return cls(
            rect=rect,
            action=action,
            border=border if border is not None else default_border(),
            color=color if color is not None else default_color(),
            highlight=highlight if highlight is not None else HighlightMode.INVERT,
        )

    def encode(self, ctx: ResolutionContext) -> dict:
        return encode_link_annotation(self, ctx)


def encode_link_annotation(annotation: LinkAnnotation, ctx: ResolutionContext) -> dict:
    """Annotation dictionary. Raises UnresolvedPageError from the action unchanged."""
    return {
        "Type": PdfName("Annot"),
        "Subtype": PdfName("Link"),
        "Rect": annotation.rect.as_array(),
        "A": encode_action(annotation.action, ctx),
        "Border": encode_border(annotation.border),
        "C": encode_color(annotation.color),
        "H": encode_highlight(annotation.highlight),
    }
