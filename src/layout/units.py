"""
Point/pixel conversion and canonical page dimensions.

Points (1/72 inch) are the canonical unit for page, margin and font geometry.
Pixels are derived from points at 96 DPI for on-screen rendering. The preview
and the exported PDF must use the same ratio or they stop matching.
"""

from enum import Enum
from typing import Dict, Tuple, Union

POINTS_PER_INCH = 72
PIXELS_PER_INCH = 96  # CSS reference DPI


class PageSize(str, Enum):
    """Supported page sizes. Values are the strings the PDF renderer expects."""
    A4 = "A4"
    LETTER = "Letter"


# (width, height) in points
PAGE_SIZES: Dict[PageSize, Tuple[float, float]] = {
    PageSize.A4: (595.28, 841.89),
    PageSize.LETTER: (612.0, 792.0),
}


def points_to_pixels(pt: float) -> float:
    """Convert typographic points to CSS pixels (96 DPI)."""
    return pt * PIXELS_PER_INCH / POINTS_PER_INCH


def pixels_to_points(px: float) -> float:
    """Convert CSS pixels (96 DPI) to typographic points."""
    return px * POINTS_PER_INCH / PIXELS_PER_INCH


def resolve_page_size(page_size: Union[PageSize, str]) -> PageSize:
    """
    Resolve a page size given as enum or string.

    Strings are matched case-insensitively ("a4", "LETTER").

    Raises:
        ValueError: If the string names no supported page size
    """
    if isinstance(page_size, PageSize):
        return page_size
    for candidate in PageSize:
        if candidate.value.lower() == str(page_size).strip().lower():
            return candidate
    allowed = ", ".join(p.value for p in PageSize)
    raise ValueError(f"Unsupported page size: {page_size!r} (expected one of: {allowed})")


def get_page_dimensions(page_size: Union[PageSize, str]) -> Tuple[float, float]:
    """Return (width_pt, height_pt) for a page size."""
    return PAGE_SIZES[resolve_page_size(page_size)]
