"""
Dimension resolver — artwork size in, sizing metrics out.

Accepts either explicit width/height fields or the free-text size the order
form stores ("16x20", "16 x 20", '16"x20"', "16×20"). Parsing never raises:
an unreadable size comes back as a ParseFailure so the caller can show a
validation message instead of a price.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

INVALID_DIMENSION_MESSAGE = "Invalid dimension format"

_NUMBER = r"(-?\d+(?:\.\d+)?|-?\.\d+)"
_INCH_MARK = r'(?:"|”|\'\'|in(?:ch(?:es)?)?)?'
_SIZE_RE = re.compile(
    _NUMBER + r"\s*" + _INCH_MARK + r"\s*[x×]\s*" + _NUMBER + r"\s*" + _INCH_MARK,
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Dimensions:
    """Artwork width and height in inches."""
    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        return not (self.width > 0 and self.height > 0)


@dataclass(frozen=True)
class ParseFailure:
    """A size string that could not be read as a width × height pair."""
    raw: str
    message: str = INVALID_DIMENSION_MESSAGE


DimensionResult = Union[Dimensions, ParseFailure]


def parse_dimensions(text) -> DimensionResult:
    """
    Extract the first width × height pair from free text.

    Separator is x, X or ×, with optional spaces and inch marks on either
    number. Zero-sized pairs are rejected — they cannot be framed.
    """
    raw = "" if text is None else str(text)
    match = _SIZE_RE.search(raw)
    if not match:
        return ParseFailure(raw=raw)
    width = float(match.group(1))
    height = float(match.group(2))
    if width <= 0 or height <= 0:
        return ParseFailure(raw=raw)
    return Dimensions(width=width, height=height)


def resolve_dimensions(width: Optional[float] = None, height: Optional[float] = None,
                       spec: Optional[str] = None) -> DimensionResult:
    """Explicit numeric fields win; otherwise fall back to the free-text size."""
    if width is not None and height is not None:
        return Dimensions(width=float(width), height=float(height))
    return parse_dimensions(spec)


# --- Derived metrics ---

def united_inches(width: float, height: float, mat_width: float) -> float:
    """Width + height, plus the mat border on all four sides."""
    return width + height + 4 * mat_width


def glazing_dimensions(width: float, height: float, mat_width: float) -> tuple:
    """Outer size of the matted artwork — what the frame and glazing must cover."""
    return width + 2 * mat_width, height + 2 * mat_width


def frame_perimeter_inches(width: float, height: float, mat_width: float) -> float:
    outer_w, outer_h = glazing_dimensions(width, height, mat_width)
    return 2 * (outer_w + outer_h)


def frame_perimeter_feet(width: float, height: float, mat_width: float) -> float:
    return frame_perimeter_inches(width, height, mat_width) / 12.0


def glazing_area_sqft(width: float, height: float, mat_width: float) -> float:
    outer_w, outer_h = glazing_dimensions(width, height, mat_width)
    return (outer_w * outer_h) / 144.0


def glazing_united_inches(width: float, height: float, mat_width: float) -> float:
    """United inches of the glazing sheet itself (no extra mat allowance)."""
    outer_w, outer_h = glazing_dimensions(width, height, mat_width)
    return outer_w + outer_h
