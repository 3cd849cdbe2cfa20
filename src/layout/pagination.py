"""
Pagination engine.

Greedy, single pass, order preserving:

1. Page 1 starts empty with the full content-area height.
2. A block taller than the current page's remaining height starts a new page,
   unless the current page is still empty (so the first block always lands
   on page 1 and an oversize block sits alone on its own page).
3. Otherwise the block joins the current page and its height is deducted,
   floored at zero.

Blocks are never split. An empty input produces zero pages.
"""

from typing import Iterable, List, Tuple

from src.layout.types import ContentBlock, HeightEstimate, Page


class PageBuilder:
    """Mutable accumulator for the page being filled during one pass."""

    def __init__(self, page_number: int, content_height_px: float):
        self.page_number = page_number
        self.remaining_height_px = content_height_px
        self.blocks: List[ContentBlock] = []
        self.heights: List[HeightEstimate] = []

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    def fits(self, height: HeightEstimate) -> bool:
        return height.height_px <= self.remaining_height_px

    def add(self, block: ContentBlock, height: HeightEstimate) -> None:
        self.blocks.append(block)
        self.heights.append(height)
        self.remaining_height_px = max(0.0, self.remaining_height_px - height.height_px)

    def build(self) -> Page:
        return Page(
            page_number=self.page_number,
            blocks=tuple(self.blocks),
            heights=tuple(self.heights),
            remaining_height_px=self.remaining_height_px,
        )


def paginate(
    estimated_blocks: Iterable[Tuple[ContentBlock, HeightEstimate]],
    content_height_px: float,
) -> List[Page]:
    """
    Partition estimated blocks into pages.

    Args:
        estimated_blocks: (block, height) pairs in document order
        content_height_px: Content-area height of one page in pixels

    Returns:
        Pages numbered 1..N; every block appears exactly once, in input order
    """
    pages: List[Page] = []
    current = PageBuilder(1, content_height_px)

    for block, height in estimated_blocks:
        if not current.fits(height) and not current.is_empty:
            pages.append(current.build())
            current = PageBuilder(current.page_number + 1, content_height_px)
        current.add(block, height)

    if not current.is_empty:
        pages.append(current.build())

    return pages
