"""
Format configuration: the user-editable page and typography settings.

All lengths are in points. The models are frozen; an edit produces a new
configuration via ``model_copy(update=...)``. Margins that leave no content
area are accepted here; the layout calculator reports them and
``validate_layout`` rejects them before pagination.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.layout.units import PageSize, resolve_page_size

FontFamily = Literal["Arial", "Georgia", "Times New Roman"]


class Margins(BaseModel):
    """Page margins in points."""
    model_config = ConfigDict(frozen=True)

    top: float = Field(20.0, ge=0, description="Top margin (pt)")
    right: float = Field(20.0, ge=0, description="Right margin (pt)")
    bottom: float = Field(20.0, ge=0, description="Bottom margin (pt)")
    left: float = Field(20.0, ge=0, description="Left margin (pt)")


class ResumeFormat(BaseModel):
    """Page size, margins, and typography for one resume."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    font_family: FontFamily = "Arial"
    font_size: float = Field(11.0, gt=0, description="Body font size (pt)")
    line_height: float = Field(1.4, gt=0, description="Line height multiplier")
    margins: Margins = Field(default_factory=Margins)
    page_size: PageSize = PageSize.A4
    section_spacing: float = Field(16.0, ge=0, description="Space between sections (pt)")
    item_spacing: float = Field(8.0, ge=0, description="Space between items (pt)")

    @field_validator("page_size", mode="before")
    @classmethod
    def normalize_page_size(cls, v):
        """Accept "a4"/"letter" in any case, as the PDF endpoints do."""
        return resolve_page_size(v)
