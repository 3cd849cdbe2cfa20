"""
Template registry.

A template contributes default format settings and visual styling (header
alignment, palette). The layout engine never looks at templates; only the
page renderer and the editor state do.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ColorScheme:
    primary: str
    secondary: str
    text: str
    accent: str


@dataclass(frozen=True)
class ResumeTemplate:
    """A visual template and the format defaults it applies when selected."""

    id: str
    name: str
    description: str
    category: str                      # classic | modern | creative | technical
    header_style: str                  # centered | left | right | split
    color_scheme: ColorScheme
    default_format: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "headerStyle": self.header_style,
            "colorScheme": {
                "primary": self.color_scheme.primary,
                "secondary": self.color_scheme.secondary,
                "text": self.color_scheme.text,
                "accent": self.color_scheme.accent,
            },
            "defaultFormat": dict(self.default_format),
        }


CLASSIC_TEMPLATE = ResumeTemplate(
    id="classic",
    name="Classic Professional",
    description=(
        "Traditional resume layout with clean lines and professional styling. "
        "Perfect for corporate roles and traditional industries."
    ),
    category="classic",
    header_style="centered",
    color_scheme=ColorScheme(
        primary="#333333",
        secondary="#666666",
        text="#333333",
        accent="#333333",
    ),
    default_format={
        "font_family": "Times New Roman",
        "font_size": 11,
        "line_height": 1.4,
        "section_spacing": 18,
        "item_spacing": 10,
    },
)

MODERN_TEMPLATE = ResumeTemplate(
    id="modern",
    name="Modern Sidebar",
    description=(
        "Contemporary layout with a left-aligned header and muted slate palette. "
        "Great for creative and tech roles."
    ),
    category="modern",
    header_style="left",
    color_scheme=ColorScheme(
        primary="#4a5568",
        secondary="#718096",
        text="#2d3748",
        accent="#4a5568",
    ),
    default_format={
        "font_family": "Arial",
        "font_size": 11,
        "line_height": 1.5,
        "section_spacing": 20,
        "item_spacing": 12,
    },
)

TEMPLATE_REGISTRY: Dict[str, ResumeTemplate] = {
    CLASSIC_TEMPLATE.id: CLASSIC_TEMPLATE,
    MODERN_TEMPLATE.id: MODERN_TEMPLATE,
}

DEFAULT_TEMPLATE_ID = CLASSIC_TEMPLATE.id


def get_template(template_id: str) -> Optional[ResumeTemplate]:
    return TEMPLATE_REGISTRY.get(template_id)


def get_all_templates() -> List[ResumeTemplate]:
    return list(TEMPLATE_REGISTRY.values())


def get_templates_by_category(category: str) -> List[ResumeTemplate]:
    return [t for t in TEMPLATE_REGISTRY.values() if t.category == category]


def get_default_template_id() -> str:
    return DEFAULT_TEMPLATE_ID


def is_valid_template_id(template_id: str) -> bool:
    return template_id in TEMPLATE_REGISTRY
