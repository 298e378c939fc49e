"""
Object model -> PDF syntax bytes.
"""

from __future__ import annotations

import math
from typing import Mapping

from pdf_links.core.models.objects import PdfName, PdfReference, PdfString, StringFormat

_NAME_DELIMITERS = set(b"()<>[]{}/%#")


def serialize_object(obj) -> bytes:
    # bool first: it is an int subclass
    if obj is None:
        return b"null"
    if isinstance(obj, bool):
        return b"true" if obj else b"false"
    if isinstance(obj, PdfName):
        return b"/" + _escape_name(obj)
    if isinstance(obj, PdfReference):
        return f"{obj.object_number} {obj.generation} R".encode("ascii")
    if isinstance(obj, PdfString):
        return _serialize_string(obj)
    if isinstance(obj, int):
        return str(obj).encode("ascii")
    if isinstance(obj, float):
        return _format_real(obj).encode("ascii")
    if isinstance(obj, (list, tuple)):
        return b"[" + b" ".join(serialize_object(item) for item in obj) + b"]"
    if isinstance(obj, Mapping):
        parts = [b"/" + _escape_name(str(key)) + b" " + serialize_object(value) for key, value in obj.items()]
        return b"<< " + b" ".join(parts) + b" >>" if parts else b"<< >>"
    raise TypeError(f"Cannot serialize {type(obj).__name__} as a PDF object")


def serialize_indirect(obj_id: int, obj, generation: int = 0) -> bytes:
    return f"{obj_id} {generation} obj ".encode("ascii") + serialize_object(obj) + b" endobj\n"


def serialize_stream(obj_id: int, data: bytes, extra: Mapping | None = None) -> bytes:
    header = dict(extra or {})
    header["Length"] = len(data)
    return f"{obj_id} 0 obj ".encode("ascii") + serialize_object(header) + b" stream\n" + data + b"\nendstream endobj\n"


def _format_real(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"PDF has no representation for {value!r}")
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _escape_name(name: str) -> bytes:
    out = bytearray()
    for byte in name.encode("utf-8"):
        if byte < 0x21 or byte > 0x7E or byte in _NAME_DELIMITERS:
            out += f"#{byte:02X}".encode("ascii")
        else:
            out.append(byte)
    return bytes(out)


def _serialize_string(obj: PdfString) -> bytes:
    if obj.fmt is StringFormat.HEXADECIMAL:
        return b"<" + obj.value.hex().upper().encode("ascii") + b">"
    escaped = obj.value.replace(b"\\", b"\\\\").replace(b"(", b"\\(").replace(b")", b"\\)").replace(b"\r", b"\\r")
    return b"(" + escaped + b")"
