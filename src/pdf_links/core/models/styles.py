"""
Visual attributes of a link annotation: border, color and highlighting mode.

Each attribute is a closed set of variants. The encoders match every variant
explicitly and reject anything else, since the variant set mirrors what the
PDF annotation dictionary accepts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, Union

from pdf_links.core.models.objects import PdfName

RGBTriple = tuple[float, float, float]


def _check_arity(components: Sequence[float], expected: int, what: str) -> None:
    if len(components) != expected:
        raise ValueError(f"{what} needs {expected} components, got {len(components)}")


@dataclass(frozen=True)
class DashPhase:
    dash_array: tuple[float, ...] = ()
    phase: float = 0.0


def encode_dash_phase(dash: DashPhase) -> list:
    """Standalone dash pattern: `[[d0 d1 ...] phase]`."""
    return [[float(x) for x in dash.dash_array], float(dash.phase)]


# -------- Border --------


@dataclass(frozen=True)
class Solid:
    color: RGBTriple = (0.0, 0.0, 1.0)

    def __post_init__(self):
        _check_arity(self.color, 3, "border color")


@dataclass(frozen=True)
class Dashed:
    color: RGBTriple
    dash: DashPhase = field(default_factory=DashPhase)

    def __post_init__(self):
        _check_arity(self.color, 3, "border color")


BorderStyle = Union[Solid, Dashed]


def default_border() -> BorderStyle:
    return Solid((0.0, 0.0, 1.0))


def encode_border(border: BorderStyle) -> list[float]:
    """
    Solid -> 3 reals. Dashed -> the same 3 reals plus the dash phase.
    The dash magnitudes are not part of the border array form.
    """
    if isinstance(border, Solid):
        return [float(c) for c in border.color]
    if isinstance(border, Dashed):
        return [float(c) for c in border.color] + [float(border.dash.phase)]
    raise TypeError(f"Unsupported border style: {border!r}")


# -------- Color --------


@dataclass(frozen=True)
class Transparent:
    pass


@dataclass(frozen=True)
class Gray:
    value: tuple[float]

    def __post_init__(self):
        _check_arity(self.value, 1, "gray color")


@dataclass(frozen=True)
class RGB:
    value: RGBTriple

    def __post_init__(self):
        _check_arity(self.value, 3, "RGB color")


@dataclass(frozen=True)
class CMYK:
    value: tuple[float, float, float, float]

    def __post_init__(self):
        _check_arity(self.value, 4, "CMYK color")


ColorValue = Union[Transparent, Gray, RGB, CMYK]


def default_color() -> ColorValue:
    return RGB((0.0, 1.0, 1.0))


def color_from_components(components: Sequence[float]) -> ColorValue:
    """Pick the color space from the number of components (0/1/3/4)."""
    if isinstance(components, (str, bytes)):
        raise ValueError(f"color components must be a list of numbers, got {components!r}")
    try:
        values = tuple(float(c) for c in components)
    except (TypeError, ValueError):
        raise ValueError(f"color components must be numbers, got {components!r}") from None
    if len(values) == 0:
        return Transparent()
    if len(values) == 1:
        return Gray(values)
    if len(values) == 3:
        return RGB(values)
    if len(values) == 4:
        return CMYK(values)
    raise ValueError(f"color needs 0, 1, 3 or 4 components, got {len(values)}")


def encode_color(color: ColorValue) -> list[float]:
    if isinstance(color, Transparent):
        return []
    if isinstance(color, Gray):
        return [float(color.value[0])]
    if isinstance(color, RGB):
        return [float(c) for c in color.value]
    if isinstance(color, CMYK):
        return [float(c) for c in color.value]
    raise TypeError(f"Unsupported color value: {color!r}")


# -------- Highlighting --------


class HighlightMode(Enum):
    NONE = "N"
    INVERT = "I"
    OUTLINE = "O"
    PUSH = "P"

    @classmethod
    def from_symbol(cls, value: str) -> "HighlightMode":
        """Accept either the PDF symbol (`I`) or the member name (`invert`)."""
        text = str(value).strip()
        for mode in cls:
            if text == mode.value or text.upper() == mode.name:
                return mode
        raise ValueError(f"Unknown highlight mode: {value!r}")


def encode_highlight(mode: HighlightMode) -> PdfName:
    if not isinstance(mode, HighlightMode):
        raise TypeError(f"Unsupported highlight mode: {mode!r}")
    return PdfName(mode.value)
