"""
Fixtures for layout engine unit tests.

Layouts are built from real format configurations so the tests exercise the
same geometry the PDF service uses.
"""

import pytest

from src.layout import (
    ContentBlock,
    HeightEstimate,
    Margins,
    PageSize,
    ResumeFormat,
    calculate_layout,
)


@pytest.fixture
def a4_format():
    """A4 page with 20pt margins on every side."""
    return ResumeFormat(page_size=PageSize.A4, margins=Margins(top=20, right=20, bottom=20, left=20))


@pytest.fixture
def letter_format():
    """US Letter page with 20pt margins on every side."""
    return ResumeFormat(page_size=PageSize.LETTER, margins=Margins(top=20, right=20, bottom=20, left=20))


@pytest.fixture
def a4_layout(a4_format):
    return calculate_layout(a4_format)


@pytest.fixture
def letter_layout(letter_format):
    return calculate_layout(letter_format)


@pytest.fixture
def make_blocks():
    """Build (block, height) pairs from a list of pixel heights."""
    def _make(heights_px):
        return [
            (ContentBlock(kind=f"block-{i}"), HeightEstimate.from_pixels(h))
            for i, h in enumerate(heights_px)
        ]
    return _make
