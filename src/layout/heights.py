"""
Height estimation for content blocks.

Two height sources exist:
- An injected BlockMeasurer (e.g. a browser that renders the block and reads
  its offsetHeight). Optional; the core never implements one.
- A deterministic heuristic, the default and the fallback.

A single run never mixes sources: if the measurer fails on any block, the
whole run is re-estimated with the heuristic.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Tuple

from src.layout.measurements import LayoutMeasurements
from src.layout.types import (
    ContentBlock,
    EducationBlock,
    HeaderBlock,
    HeightEstimate,
    JobBlock,
    SectionTitleBlock,
    SkillsBlock,
    SummaryBlock,
)

logger = logging.getLogger(__name__)

# Heuristic baselines in px at the reference font size
REFERENCE_FONT_SIZE_PT = 11.0
HEADER_HEIGHT_PX = 150
SECTION_TITLE_HEIGHT_PX = 30
SUMMARY_BASE_PX = 80
JOB_BASE_PX = 80
JOB_BULLET_PX = 30
EDUCATION_HEIGHT_PX = 50
SKILLS_BASE_PX = 60
CHARS_PER_LINE = 80
WRAPPED_LINE_PX = 20

SOURCE_HEURISTIC = "heuristic"
SOURCE_MEASURED = "measured"


class BlockMeasurer(Protocol):
    """Injected capability that measures a rendered block, in pixels."""

    def measure_block_height(self, block: ContentBlock, layout: LayoutMeasurements) -> float:
        ...


class MeasurementError(Exception):
    """A measurer returned an unusable height."""


@dataclass(frozen=True)
class EstimationResult:
    """Blocks paired with their heights, and which source produced them."""

    items: List[Tuple[ContentBlock, HeightEstimate]]
    source: str

    @property
    def blocks(self) -> List[ContentBlock]:
        return [block for block, _ in self.items]

    @property
    def total_height_px(self) -> float:
        return sum(height.height_px for _, height in self.items)


def _wrapped_lines(text_length: int) -> int:
    """Approximate wrapped line count: one line per ~80 characters."""
    return math.ceil(text_length / CHARS_PER_LINE)


class HeightEstimator:
    """
    Maps content blocks to height estimates for one layout.

    Args:
        layout: Layout measurements of the current format
        measurer: Optional real measurement primitive
        scale_to_font: Scale heuristic baselines by font_size / 11pt. Applied
            to every heuristic estimate of the run or to none.
    """

    def __init__(
        self,
        layout: LayoutMeasurements,
        measurer: Optional[BlockMeasurer] = None,
        scale_to_font: bool = False,
    ):
        self.layout = layout
        self.measurer = measurer
        self.scale_to_font = scale_to_font

    @property
    def font_scale(self) -> float:
        if not self.scale_to_font:
            return 1.0
        return self.layout.font_size_pt / REFERENCE_FONT_SIZE_PT

    def heuristic_height_px(self, block: ContentBlock) -> float:
        """Heuristic pixel height for one block."""
        scale = self.font_scale

        if isinstance(block, HeaderBlock):
            return HEADER_HEIGHT_PX * scale
        if isinstance(block, SectionTitleBlock):
            return SECTION_TITLE_HEIGHT_PX * scale
        if isinstance(block, SummaryBlock):
            return (SUMMARY_BASE_PX + _wrapped_lines(len(block.text)) * WRAPPED_LINE_PX) * scale
        if isinstance(block, JobBlock):
            return (JOB_BASE_PX + len(block.bullets) * JOB_BULLET_PX) * scale
        if isinstance(block, EducationBlock):
            return EDUCATION_HEIGHT_PX * scale
        if isinstance(block, SkillsBlock):
            return (SKILLS_BASE_PX + _wrapped_lines(len(block.joined_text)) * WRAPPED_LINE_PX) * scale

        # Unknown kind: one line of body text
        return self.layout.line_height_px

    def estimate(self, block: ContentBlock) -> HeightEstimate:
        """Heuristic height estimate for one block."""
        return HeightEstimate.from_pixels(self.heuristic_height_px(block))

    def measure(self, block: ContentBlock) -> HeightEstimate:
        """
        Measure one block with the injected measurer.

        Raises:
            MeasurementError: If no measurer is configured or the measured
                height is negative or not finite
        """
        if self.measurer is None:
            raise MeasurementError("No block measurer configured")
        height_px = self.measurer.measure_block_height(block, self.layout)
        if height_px is None or not math.isfinite(height_px) or height_px < 0:
            raise MeasurementError(f"Invalid measured height {height_px!r} for {block.kind} block")
        return HeightEstimate.from_pixels(float(height_px))

    def estimate_all(self, blocks: Sequence[ContentBlock]) -> EstimationResult:
        """
        Estimate every block with a single height source.

        The measurer is used for all blocks when present; any failure drops
        the whole run back to the heuristic.
        """
        if self.measurer is not None:
            try:
                items = [(block, self.measure(block)) for block in blocks]
                return EstimationResult(items=items, source=SOURCE_MEASURED)
            except Exception as e:
                logger.warning(
                    f"Block measurement failed ({type(e).__name__}: {e}); "
                    f"using heuristic heights for all {len(blocks)} blocks"
                )

        items = [(block, self.estimate(block)) for block in blocks]
        return EstimationResult(items=items, source=SOURCE_HEURISTIC)
