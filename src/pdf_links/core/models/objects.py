"""
Low-level PDF object model.

Arrays are plain lists, dictionaries are dicts keyed by name text, numbers are
int/float, booleans are bool and the null object is None. Only the types below
need wrappers because Python has no native counterpart for them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class PdfName(str):
    """Name object (`/Annot`). Compares equal to its text without the slash."""

    def __repr__(self) -> str:
        return f"PdfName({str(self)!r})"


class StringFormat(Enum):
    LITERAL = "literal"
    HEXADECIMAL = "hexadecimal"


@dataclass(frozen=True)
class PdfString:
    value: bytes
    fmt: StringFormat = StringFormat.LITERAL

    @classmethod
    def literal(cls, text: str) -> "PdfString":
        return cls(text.encode("utf-8"), StringFormat.LITERAL)


class PdfReference(NamedTuple):
    """Indirect reference: object number + generation number."""

    object_number: int
    generation: int = 0
