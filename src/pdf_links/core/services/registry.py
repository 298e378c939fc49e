"""
Document-scoped collection of link annotations.

Each registered annotation gets a name `PT<n>`, n being the number of
annotations registered before it. Names are never reused. The registry owns
the annotation values; handles are only lookup keys.

Not thread-safe: callers sharing a registry must serialize `register`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator

from pdf_links.core.errors import RegistryClosedError, UnresolvedPageError
from pdf_links.core.models.context import ResolutionContext
from pdf_links.core.models.link_annotation import LinkAnnotation
from pdf_links.core.models.objects import PdfName

logger = logging.getLogger(__name__)

HANDLE_PREFIX = "PT"


@dataclass(frozen=True)
class AnnotationHandle:
    name: str

    @classmethod
    def for_index(cls, index: int) -> "AnnotationHandle":
        return cls(f"{HANDLE_PREFIX}{index}")

    def __str__(self) -> str:
        return self.name


class AnnotationRegistry:
    def __init__(self):
        self._annotations: Dict[str, LinkAnnotation] = {}
        self._issued = 0
        self._closed = False

    def __len__(self) -> int:
        return len(self._annotations)

    def __contains__(self, handle: object) -> bool:
        return _name_of(handle) in self._annotations

    def __iter__(self) -> Iterator[tuple[AnnotationHandle, LinkAnnotation]]:
        for name, annotation in self._annotations.items():
            yield AnnotationHandle(name), annotation

    @property
    def is_open(self) -> bool:
        return not self._closed

    def register(self, annotation: LinkAnnotation) -> AnnotationHandle:
        if self._closed:
            raise RegistryClosedError("annotation registry was already handed to the document writer")
        handle = AnnotationHandle.for_index(self._issued)
        self._annotations[handle.name] = annotation
        self._issued += 1
        logger.debug("Registered link annotation %s", handle.name)
        return handle

    def get(self, handle: AnnotationHandle | str) -> LinkAnnotation:
        return self._annotations[_name_of(handle)]

    def handles(self) -> list[AnnotationHandle]:
        return [AnnotationHandle(name) for name in self._annotations]

    def encode_one(self, handle: AnnotationHandle | str, ctx: ResolutionContext) -> dict:
        name = _name_of(handle)
        annotation = self._annotations[name]
        try:
            return annotation.encode(ctx)
        except UnresolvedPageError as exc:
            logger.error("Link annotation %s targets unresolved page %s", name, exc.page_index)
            raise UnresolvedPageError(exc.page_index, handle=name) from exc

    def encode_all(self, ctx: ResolutionContext) -> list[tuple[AnnotationHandle, dict]]:
        """
        Encode every annotation in issue order.
        The first failure propagates and nothing is returned for the batch.
        """
        encoded = [(handle, self.encode_one(handle, ctx)) for handle in self.handles()]
        logger.debug("Encoded %d link annotations", len(encoded))
        return encoded

    def close(self) -> None:
        """Mark the registry as consumed by the writer. Later registrations fail."""
        self._closed = True

    def collapsed_dictionary(self) -> dict:
        """
        Legacy single-dictionary form of the whole registry.

        Limitation: only PT0's rectangle survives and actions and visual
        attributes of every annotation are dropped. Use `encode_all` for real
        output. This exists for callers that still expect one shared dictionary.
        """
        if not self._annotations:
            return {}
        first = self._annotations[AnnotationHandle.for_index(0).name]
        return {
            "Type": PdfName("Annot"),
            "Subtype": PdfName("Link"),
            "Rect": first.rect.as_array(),
        }


def _name_of(handle: object) -> str:
    if isinstance(handle, AnnotationHandle):
        return handle.name
    return str(handle)
