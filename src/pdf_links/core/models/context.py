from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from pdf_links.core.errors import UnresolvedPageError
from pdf_links.core.models.objects import PdfReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """
    Page index -> (object number, generation) of the page in the emitted document.

    Borrowed for a single encode pass. Encoders read it and never keep it.
    """

    page_objects: Mapping[int, tuple[int, int]]

    def resolve(self, page_index: int) -> PdfReference:
        identity = self.page_objects.get(page_index)
        if identity is None:
            logger.error("No object identity for page index %s", page_index)
            raise UnresolvedPageError(page_index)
        object_number, generation = identity
        return PdfReference(object_number, generation)

    def __contains__(self, page_index: object) -> bool:
        return page_index in self.page_objects
