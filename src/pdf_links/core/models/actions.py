"""
What activating a link does.

Actions carry only logical page indexes. The object identity of the target page
is looked up in the ResolutionContext when the action is encoded, because page
objects are numbered by the writer after the annotations have been built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pdf_links.core.models.context import ResolutionContext
from pdf_links.core.models.objects import PdfName, PdfString


@dataclass(frozen=True)
class XYZ:
    """
    Display `page` with (`left`, `top`) at the upper-left corner of the window,
    magnified by `zoom`.

    None for any of the three (and a zoom of 0) means "keep the viewer's current
    value". Both forms are written out as given.
    """

    page: int
    left: float | None = None
    top: float | None = None
    zoom: float | None = None


Destination = XYZ


@dataclass(frozen=True)
class GoTo:
    destination: Destination


@dataclass(frozen=True)
class OpenURI:
    uri: str


Action = Union[GoTo, OpenURI]


def go_to(destination: Destination) -> GoTo:
    return GoTo(destination)


def open_uri(uri: str) -> OpenURI:
    return OpenURI(uri)


def _real_or_null(value: float | None) -> float | None:
    return None if value is None else float(value)


def encode_destination(destination: Destination, ctx: ResolutionContext) -> list:
    if isinstance(destination, XYZ):
        return [
            ctx.resolve(destination.page),
            PdfName("XYZ"),
            _real_or_null(destination.left),
            _real_or_null(destination.top),
            _real_or_null(destination.zoom),
        ]
    raise TypeError(f"Unsupported destination: {destination!r}")


def encode_action(action: Action, ctx: ResolutionContext) -> dict:
    if isinstance(action, GoTo):
        return {"S": PdfName("GoTo"), "D": encode_destination(action.destination, ctx)}
    if isinstance(action, OpenURI):
        return {"S": PdfName("URI"), "URI": PdfString.literal(action.uri)}
    raise TypeError(f"Unsupported action: {action!r}")
