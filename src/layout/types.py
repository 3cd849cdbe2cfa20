"""
Data types for the layout engine.

These types flow through a layout run:
- ContentBlock: one atomic, measurable unit of resume content (tagged by kind)
- HeightEstimate: rendered height of a block in px and pt
- Page: blocks assigned to one page frame plus its remaining height budget

All of them are frozen. Blocks carry no position; position is assigned only
by pagination.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from src.layout.units import pixels_to_points


class BlockKind(str, Enum):
    """Closed set of block kinds the height heuristic knows about."""
    HEADER = "header"
    SECTION_TITLE = "section-title"
    SUMMARY = "summary"
    JOB = "job"
    EDUCATION = "education"
    SKILLS = "skills"


SKILLS_SEPARATOR = " • "

_KNOWN_KINDS = frozenset(kind.value for kind in BlockKind)


@dataclass(frozen=True)
class ContentBlock:
    """
    Base content block.

    Instantiated directly only for kinds outside BlockKind (e.g. a custom
    divider); those get the single-line-height estimate.
    """

    kind: str

    def __post_init__(self):
        # Known kinds need their subclass fields
        if type(self) is ContentBlock and self.kind in _KNOWN_KINDS:
            raise ValueError(
                f"Block kind {self.kind!r} must be built with its own block class, "
                f"not ContentBlock"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"kind": str(self.kind)}


@dataclass(frozen=True)
class HeaderBlock(ContentBlock):
    """Name, title and contact line."""
    kind: str = field(default=BlockKind.HEADER.value, init=False)
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "name": self.name,
            "title": self.title,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
        }


@dataclass(frozen=True)
class SectionTitleBlock(ContentBlock):
    kind: str = field(default=BlockKind.SECTION_TITLE.value, init=False)
    title: str = ""
    section: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "title": self.title, "section": self.section}


@dataclass(frozen=True)
class SummaryBlock(ContentBlock):
    kind: str = field(default=BlockKind.SUMMARY.value, init=False)
    text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "text": self.text}


@dataclass(frozen=True)
class JobBlock(ContentBlock):
    """One work experience entry with its bullet lines."""
    kind: str = field(default=BlockKind.JOB.value, init=False)
    company: str = ""
    position: str = ""
    dates: str = ""
    bullets: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "company": self.company,
            "position": self.position,
            "dates": self.dates,
            "bullets": list(self.bullets),
        }


@dataclass(frozen=True)
class EducationBlock(ContentBlock):
    kind: str = field(default=BlockKind.EDUCATION.value, init=False)
    school: str = ""
    degree: str = ""
    field_of_study: str = ""
    date: str = ""
    gpa: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "school": self.school,
            "degree": self.degree,
            "field": self.field_of_study,
            "date": self.date,
            "gpa": self.gpa,
        }


@dataclass(frozen=True)
class SkillsBlock(ContentBlock):
    kind: str = field(default=BlockKind.SKILLS.value, init=False)
    skills: Tuple[str, ...] = ()

    @property
    def joined_text(self) -> str:
        return SKILLS_SEPARATOR.join(self.skills)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "skills": list(self.skills)}


@dataclass(frozen=True)
class HeightEstimate:
    """
    Rendered height of a block in both units.

    Build it with ``from_pixels`` so height_pt is always height_px * 72/96.
    """

    height_px: float
    height_pt: float

    @classmethod
    def from_pixels(cls, height_px: float) -> "HeightEstimate":
        return cls(height_px=height_px, height_pt=pixels_to_points(height_px))

    def to_dict(self) -> Dict[str, Any]:
        return {"heightPx": self.height_px, "heightPt": self.height_pt}


@dataclass(frozen=True)
class Page:
    """
    One page of the partition.

    page_number is 1-based. remaining_height_px is the content-area height
    minus the heights of the assigned blocks, floored at zero.
    """

    page_number: int
    blocks: Tuple[ContentBlock, ...]
    heights: Tuple[HeightEstimate, ...]
    remaining_height_px: float

    @property
    def block_count(self) -> int:
        return len(self.blocks)

    @property
    def used_height_px(self) -> float:
        return sum(h.height_px for h in self.heights)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "pageNumber": self.page_number,
            "remainingHeightPx": self.remaining_height_px,
            "usedHeightPx": self.used_height_px,
            "blocks": [
                {**block.to_dict(), **height.to_dict()}
                for block, height in zip(self.blocks, self.heights)
            ],
        }
