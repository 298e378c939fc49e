"""
Exceptions raised while encoding link annotations.
"""

from __future__ import annotations


class PdfLinksError(Exception):
    """Base class for errors raised by this package."""


class UnresolvedPageError(PdfLinksError, LookupError):
    """A destination targets a page index the resolution context does not know.

    This is a caller defect: every page referenced by a registered annotation has
    to be given an object identity before the annotations are encoded.
    """

    def __init__(self, page_index: int, handle: str | None = None):
        self.page_index = page_index
        self.handle = handle
        if handle is None:
            message = f"page index {page_index} has no object identity in the resolution context"
        else:
            message = f"annotation {handle} targets page index {page_index}, which has no object identity in the resolution context"
        super().__init__(message)


class RegistryClosedError(PdfLinksError, RuntimeError):
    """Raised when registering into a registry that was already handed to the writer."""
