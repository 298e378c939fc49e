from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in PDF user space (points, y grows up)."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Rectangle given by its lower-left and upper-right corners.

    Corner order is the caller's business, nothing here swaps or validates them.
    """

    ll: Point
    ur: Point

    @classmethod
    def from_bounds(cls, llx: float, lly: float, urx: float, ury: float) -> "Rect":
        return cls(Point(llx, lly), Point(urx, ury))

    def as_array(self) -> list[float]:
        return [float(self.ll.x), float(self.ll.y), float(self.ur.x), float(self.ur.y)]
