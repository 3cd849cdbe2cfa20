"""
Layout run: format + content -> measurements -> heights -> pages.

``run_layout`` is the atomic unit callers re-invoke whenever the format or
the content changes. It keeps no state between runs; a caller that receives
a newer edit before using an older result discards the older result.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from src.layout.blocks import flatten_resume
from src.layout.format_config import ResumeFormat
from src.layout.heights import BlockMeasurer, HeightEstimator
from src.layout.measurements import LayoutMeasurements, calculate_layout, validate_layout
from src.layout.pagination import paginate
from src.layout.types import Page

if TYPE_CHECKING:
    from src.resume.schema import ResumeContent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResult:
    """Outcome of one layout run."""

    layout: LayoutMeasurements
    pages: List[Page]
    height_source: str
    total_blocks: int

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {
            "layout": self.layout.to_dict(),
            "pageCount": self.page_count,
            "totalBlocks": self.total_blocks,
            "heightSource": self.height_source,
            "pages": [page.to_dict() for page in self.pages],
        }


def run_layout(
    fmt: ResumeFormat,
    content: "ResumeContent",
    measurer: Optional[BlockMeasurer] = None,
    scale_to_font: bool = False,
) -> LayoutResult:
    """
    Compute the page partition for a resume.

    Args:
        fmt: Format configuration
        content: Resume content to flatten into blocks
        measurer: Optional real measurement primitive
        scale_to_font: Scale heuristic heights by the configured font size

    Returns:
        LayoutResult with measurements and pages

    Raises:
        InvalidFormatError: If margins leave no content area. Raised before
            any estimation or pagination.
    """
    layout = validate_layout(calculate_layout(fmt))

    blocks = flatten_resume(content)
    estimator = HeightEstimator(layout, measurer=measurer, scale_to_font=scale_to_font)
    estimation = estimator.estimate_all(blocks)
    pages = paginate(estimation.items, layout.content_height_px)

    logger.info(
        f"Layout run: {len(blocks)} blocks -> {len(pages)} page(s) "
        f"({layout.page_size.value}, {estimation.source} heights, "
        f"content height {layout.content_height_px:.1f}px)"
    )

    return LayoutResult(
        layout=layout,
        pages=pages,
        height_source=estimation.source,
        total_blocks=len(blocks),
    )
