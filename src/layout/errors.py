"""
Exceptions raised by the layout engine.

Only an unusable page geometry is an error. Empty input, a missing
measurement primitive and unknown block kinds all have defined fallbacks.
"""


class LayoutError(Exception):
    """Base class for layout engine errors."""


class InvalidFormatError(LayoutError, ValueError):
    """
    Margins consume the whole page in one dimension.

    Raised before any height estimation or pagination is attempted, so a
    non-positive content area is never paginated against.
    """

    def __init__(self, dimension: str, content_size_pt: float, page_size_pt: float):
        self.dimension = dimension
        self.content_size_pt = content_size_pt
        self.page_size_pt = page_size_pt
        super().__init__(
            f"Margins leave no content {dimension}: "
            f"{content_size_pt:.2f}pt available of {page_size_pt:.2f}pt page {dimension}"
        )
