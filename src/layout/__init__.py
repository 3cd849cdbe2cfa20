"""
Layout engine: pagination and unit conversion for resumes.

Pipeline for one run:

1. Unit converter - points <-> pixels at 96 DPI, canonical page sizes
2. Layout calculator - format configuration -> page/content geometry
3. Block flattening - resume content -> ordered content blocks
4. Height estimator - block -> height (injected measurer or heuristic)
5. Pagination engine - blocks + heights -> pages

Every step is a pure function of its inputs.
"""

from src.layout.blocks import flatten_resume, format_date_range
from src.layout.engine import LayoutResult, run_layout
from src.layout.errors import InvalidFormatError, LayoutError
from src.layout.format_config import Margins, ResumeFormat
from src.layout.heights import BlockMeasurer, EstimationResult, HeightEstimator
from src.layout.measurements import LayoutMeasurements, calculate_layout, validate_layout
from src.layout.pagination import paginate
from src.layout.types import (
    BlockKind,
    ContentBlock,
    EducationBlock,
    HeaderBlock,
    HeightEstimate,
    JobBlock,
    Page,
    SectionTitleBlock,
    SkillsBlock,
    SummaryBlock,
)
from src.layout.units import (
    PAGE_SIZES,
    PageSize,
    get_page_dimensions,
    pixels_to_points,
    points_to_pixels,
)

__all__ = [
    # Units
    "PAGE_SIZES",
    "PageSize",
    "get_page_dimensions",
    "pixels_to_points",
    "points_to_pixels",
    # Format and layout
    "Margins",
    "ResumeFormat",
    "LayoutMeasurements",
    "calculate_layout",
    "validate_layout",
    # Blocks
    "BlockKind",
    "ContentBlock",
    "HeaderBlock",
    "SectionTitleBlock",
    "SummaryBlock",
    "JobBlock",
    "EducationBlock",
    "SkillsBlock",
    "flatten_resume",
    "format_date_range",
    # Heights
    "BlockMeasurer",
    "EstimationResult",
    "HeightEstimate",
    "HeightEstimator",
    # Pagination
    "Page",
    "paginate",
    "LayoutResult",
    "run_layout",
    # Errors
    "LayoutError",
    "InvalidFormatError",
]
