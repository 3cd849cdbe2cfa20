"""
Layout calculator.

Turns a ResumeFormat into absolute page geometry. Every quantity is stored in
points; pixel values are properties derived through ``points_to_pixels`` so
the two units can never disagree.
"""

from dataclasses import dataclass
from typing import Any, Dict

from src.layout.errors import InvalidFormatError
from src.layout.format_config import ResumeFormat
from src.layout.units import PageSize, get_page_dimensions, points_to_pixels


@dataclass(frozen=True)
class LayoutMeasurements:
    """
    Derived page geometry for one format configuration.

    Recomputed from scratch on every format change, never mutated.
    Content dimensions may be non-positive when margins are too large;
    check ``is_valid`` or call ``validate_layout`` before paginating.
    """

    page_size: PageSize
    page_width_pt: float
    page_height_pt: float
    margin_top_pt: float
    margin_right_pt: float
    margin_bottom_pt: float
    margin_left_pt: float
    content_width_pt: float
    content_height_pt: float
    font_size_pt: float
    line_height_pt: float              # font size x line height multiplier
    section_spacing_pt: float
    item_spacing_pt: float
    font_family: str = "Arial"

    @property
    def page_width_px(self) -> float:
        return points_to_pixels(self.page_width_pt)

    @property
    def page_height_px(self) -> float:
        return points_to_pixels(self.page_height_pt)

    @property
    def content_width_px(self) -> float:
        return points_to_pixels(self.content_width_pt)

    @property
    def content_height_px(self) -> float:
        return points_to_pixels(self.content_height_pt)

    @property
    def margin_top_px(self) -> float:
        return points_to_pixels(self.margin_top_pt)

    @property
    def margin_right_px(self) -> float:
        return points_to_pixels(self.margin_right_pt)

    @property
    def margin_bottom_px(self) -> float:
        return points_to_pixels(self.margin_bottom_pt)

    @property
    def margin_left_px(self) -> float:
        return points_to_pixels(self.margin_left_pt)

    @property
    def font_size_px(self) -> float:
        return points_to_pixels(self.font_size_pt)

    @property
    def line_height_px(self) -> float:
        return points_to_pixels(self.line_height_pt)

    @property
    def section_spacing_px(self) -> float:
        return points_to_pixels(self.section_spacing_pt)

    @property
    def item_spacing_px(self) -> float:
        return points_to_pixels(self.item_spacing_pt)

    @property
    def is_valid(self) -> bool:
        """True when both content dimensions are strictly positive."""
        return self.content_width_pt > 0 and self.content_height_pt > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses (pt and px)."""
        return {
            "pageSize": self.page_size.value,
            "fontFamily": self.font_family,
            "pageWidthPt": self.page_width_pt,
            "pageHeightPt": self.page_height_pt,
            "pageWidthPx": self.page_width_px,
            "pageHeightPx": self.page_height_px,
            "contentWidthPt": self.content_width_pt,
            "contentHeightPt": self.content_height_pt,
            "contentWidthPx": self.content_width_px,
            "contentHeightPx": self.content_height_px,
            "margins": {
                "topPt": self.margin_top_pt,
                "rightPt": self.margin_right_pt,
                "bottomPt": self.margin_bottom_pt,
                "leftPt": self.margin_left_pt,
                "topPx": self.margin_top_px,
                "rightPx": self.margin_right_px,
                "bottomPx": self.margin_bottom_px,
                "leftPx": self.margin_left_px,
            },
            "fontSizePt": self.font_size_pt,
            "fontSizePx": self.font_size_px,
            "lineHeightPt": self.line_height_pt,
            "lineHeightPx": self.line_height_px,
            "sectionSpacingPt": self.section_spacing_pt,
            "sectionSpacingPx": self.section_spacing_px,
            "itemSpacingPt": self.item_spacing_pt,
            "itemSpacingPx": self.item_spacing_px,
            "isValid": self.is_valid,
        }


def calculate_layout(fmt: ResumeFormat) -> LayoutMeasurements:
    """
    Derive layout measurements from a format configuration.

    Pure function: no caching, same input always gives the same output.
    Content dimensions are page dimension minus the two opposing margins,
    without clamping.

    Args:
        fmt: Format configuration (page size, margins, typography)

    Returns:
        LayoutMeasurements with point fields populated
    """
    page_width_pt, page_height_pt = get_page_dimensions(fmt.page_size)
    margins = fmt.margins

    return LayoutMeasurements(
        page_size=fmt.page_size,
        page_width_pt=page_width_pt,
        page_height_pt=page_height_pt,
        margin_top_pt=margins.top,
        margin_right_pt=margins.right,
        margin_bottom_pt=margins.bottom,
        margin_left_pt=margins.left,
        content_width_pt=page_width_pt - margins.left - margins.right,
        content_height_pt=page_height_pt - margins.top - margins.bottom,
        font_size_pt=fmt.font_size,
        line_height_pt=fmt.font_size * fmt.line_height,
        section_spacing_pt=fmt.section_spacing,
        item_spacing_pt=fmt.item_spacing,
        font_family=fmt.font_family,
    )


def validate_layout(layout: LayoutMeasurements) -> LayoutMeasurements:
    """
    Reject layouts whose margins leave no content area.

    Returns:
        The same measurements, for chaining

    Raises:
        InvalidFormatError: If content width or height is not positive
    """
    if layout.content_width_pt <= 0:
        raise InvalidFormatError("width", layout.content_width_pt, layout.page_width_pt)
    if layout.content_height_pt <= 0:
        raise InvalidFormatError("height", layout.content_height_pt, layout.page_height_pt)
    return layout
