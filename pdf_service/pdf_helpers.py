"""
Helper functions for PDF generation from a paginated resume.

These functions turn a layout result (pages of content blocks) into a
complete HTML document with one fixed-size frame per page, ready for
rendering via Playwright.
"""

import re
from html import escape
from typing import Optional

from src.layout.engine import LayoutResult
from src.layout.measurements import LayoutMeasurements
from src.layout.types import (
    ContentBlock,
    EducationBlock,
    HeaderBlock,
    JobBlock,
    SectionTitleBlock,
    SkillsBlock,
    SummaryBlock,
)
from src.resume.templates import ResumeTemplate

FONT_STACKS = {
    "Arial": "Arial, Helvetica, sans-serif",
    "Georgia": "Georgia, Times, serif",
    "Times New Roman": "'Times New Roman', Times, serif",
}


def sanitize_for_path(text: str) -> str:
    """
    Sanitize text for use in filesystem paths.

    Removes special characters (except word chars, spaces, hyphens)
    and replaces spaces with underscores.

    Args:
        text: Raw text (candidate name, job title, etc.)

    Returns:
        Sanitized string safe for filesystem paths

    Example:
        >>> sanitize_for_path("John Doe (Resume)")
        "John_Doe__Resume_"
    """
    # Remove special characters except word characters, spaces, and hyphens
    cleaned = re.sub(r'[^\w\s-]', '_', text)
    # Replace spaces with underscores
    return cleaned.replace(" ", "_")


def build_resume_filename(name: Optional[str]) -> str:
    """Build the download filename for a resume PDF."""
    if name and name.strip():
        return f"Resume_{sanitize_for_path(name.strip())}.pdf"
    return "resume.pdf"


def render_block_html(block: ContentBlock, template: ResumeTemplate) -> str:
    """
    Render one content block as HTML.

    All user text is escaped. Unknown block kinds render as an empty
    placeholder div so they still occupy their slot on the page.
    """
    if isinstance(block, HeaderBlock):
        align = "left" if template.header_style == "left" else "center"
        contact = "".join(
            f"<span>{escape(part)}</span>"
            for part in (block.email, block.phone, block.location)
            if part
        )
        title_html = f'<p class="title">{escape(block.title)}</p>' if block.title else ""
        return (
            f'<div class="block header" style="text-align: {align};">'
            f'<h1 class="name">{escape(block.name)}</h1>'
            f"{title_html}"
            f'<div class="contact" style="justify-content: {"flex-start" if align == "left" else "center"};">{contact}</div>'
            f"</div>"
        )

    if isinstance(block, SectionTitleBlock):
        return f'<h2 class="block section-title" data-section="{escape(block.section)}">{escape(block.title)}</h2>'

    if isinstance(block, SummaryBlock):
        return f'<p class="block summary">{escape(block.text)}</p>'

    if isinstance(block, JobBlock):
        bullets = "".join(f"<li>{escape(bullet)}</li>" for bullet in block.bullets)
        bullets_html = f'<ul class="bullets">{bullets}</ul>' if bullets else ""
        details = " | ".join(escape(part) for part in (block.company, block.dates) if part)
        return (
            f'<div class="block job">'
            f'<div class="job-title">{escape(block.position)}</div>'
            f'<div class="job-details">{details}</div>'
            f"{bullets_html}"
            f"</div>"
        )

    if isinstance(block, EducationBlock):
        title = escape(block.degree)
        if block.field_of_study:
            title = f"{title} in {escape(block.field_of_study)}"
        details = [escape(part) for part in (block.school, block.date) if part]
        if block.gpa:
            details.append(f"GPA: {escape(block.gpa)}")
        return (
            f'<div class="block education">'
            f'<div class="edu-title">{title}</div>'
            f'<div class="edu-details">{" | ".join(details)}</div>'
            f"</div>"
        )

    if isinstance(block, SkillsBlock):
        return f'<p class="block skills">{escape(block.joined_text)}</p>'

    return f'<div class="block" data-kind="{escape(str(block.kind))}"></div>'


def build_page_css(layout: LayoutMeasurements, template: ResumeTemplate) -> str:
    """
    Build the stylesheet for fixed-size page frames.

    Page frames are sized in px from the same point geometry the paginator
    used; margins become frame padding in pt so the PDF uses zero margins.
    """
    colors = template.color_scheme
    font_stack = FONT_STACKS.get(layout.font_family, FONT_STACKS["Arial"])
    line_height = layout.line_height_pt / layout.font_size_pt

    return f"""
        @page {{
            size: {layout.page_size.value};
            margin: 0;
        }}

        * {{
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }}

        body {{
            font-family: {font_stack};
            font-size: {layout.font_size_pt}pt;
            line-height: {line_height};
            color: {colors.text};
            background: white;
        }}

        .page {{
            width: {layout.page_width_px}px;
            height: {layout.page_height_px}px;
            padding: {layout.margin_top_pt}pt {layout.margin_right_pt}pt {layout.margin_bottom_pt}pt {layout.margin_left_pt}pt;
            page-break-after: always;
            break-after: page;
            position: relative;
            overflow: hidden;
        }}

        .page:last-child {{
            page-break-after: auto;
            break-after: auto;
        }}

        .header {{
            margin-bottom: {layout.section_spacing_pt}pt;
            padding-bottom: {layout.item_spacing_pt}pt;
            border-bottom: 2px solid {colors.primary};
        }}

        .name {{
            font-size: {layout.font_size_pt * 1.8}pt;
            font-weight: 700;
            text-transform: uppercase;
            letter-spacing: 1px;
            color: {colors.primary};
        }}

        .title {{
            font-size: {layout.font_size_pt * 1.1}pt;
            font-style: italic;
            color: {colors.secondary};
        }}

        .contact {{
            display: flex;
            flex-wrap: wrap;
            gap: 15px;
            font-size: {layout.font_size_pt * 0.9}pt;
            color: {colors.secondary};
        }}

        .section-title {{
            font-size: {layout.font_size_pt * 1.2}pt;
            font-weight: 700;
            text-transform: uppercase;
            margin-top: {layout.section_spacing_pt}pt;
            margin-bottom: {layout.item_spacing_pt}pt;
            border-bottom: 1px solid {colors.accent};
            color: {colors.accent};
        }}

        .page > .section-title:first-child {{
            margin-top: 0;
        }}

        .job, .education {{
            margin-bottom: {layout.item_spacing_pt}pt;
        }}

        .job-title, .edu-title {{
            font-weight: 700;
        }}

        .job-details, .edu-details {{
            color: {colors.secondary};
            font-style: italic;
        }}

        .bullets {{
            padding-left: 1.5em;
            list-style-position: outside;
        }}

        .bullets li {{
            list-style-type: disc;
            margin: 0.2em 0;
        }}

        .page-number {{
            position: absolute;
            bottom: {layout.margin_bottom_pt / 2}pt;
            right: {layout.margin_right_pt}pt;
            font-size: {layout.font_size_pt * 0.8}pt;
            color: {colors.secondary};
        }}
    """


def build_paged_html(
    result: LayoutResult,
    template: ResumeTemplate,
    show_page_numbers: bool = False,
) -> str:
    """
    Build complete HTML document with one frame per paginated page.

    Args:
        result: Layout result from run_layout
        template: Template providing palette and header style
        show_page_numbers: Add "n / total" to each page frame

    Returns:
        Complete HTML document string
    """
    total = result.page_count
    page_parts = []
    for page in result.pages:
        blocks_html = "".join(render_block_html(block, template) for block in page.blocks)
        number_html = (
            f'<div class="page-number">{page.page_number} / {total}</div>'
            if show_page_numbers else ""
        )
        page_parts.append(
            f'<div class="page" data-page="{page.page_number}">{blocks_html}{number_html}</div>'
        )

    css = build_page_css(result.layout, template)
    pages_html = "\n".join(page_parts)

    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Resume</title>
    <style>{css}</style>
</head>
<body class="template-{escape(template.id)}">
{pages_html}
</body>
</html>
    """


def wrap_html_with_css(html: str, css: Optional[str]) -> str:
    """Wrap an HTML fragment with a stylesheet for the generic endpoint."""
    if not css:
        return html
    return f"""
<!DOCTYPE html>
<html>
<head>
    <style>{css}</style>
</head>
<body>
    {html}
</body>
</html>
    """
