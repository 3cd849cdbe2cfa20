"""
Flatten a resume document into an ordered sequence of content blocks.

Canonical order: header, then summary, experience, education, skills. The
header is always emitted; every other section is emitted as a section title
followed by its entries, and omitted entirely when its text or collection is
empty.
"""

from typing import TYPE_CHECKING, Dict, List

from src.layout.types import (
    ContentBlock,
    EducationBlock,
    HeaderBlock,
    JobBlock,
    SectionTitleBlock,
    SkillsBlock,
    SummaryBlock,
)

if TYPE_CHECKING:
    from src.resume.schema import ResumeContent

SECTION_ORDER = ("summary", "experience", "education", "skills")

SECTION_TITLES: Dict[str, str] = {
    "summary": "Professional Summary",
    "experience": "Professional Experience",
    "education": "Education",
    "skills": "Core Competencies",
}


def format_date_range(start: str, end: str, current: bool) -> str:
    """
    Format a job's date range the way the templates print it.

    Example:
        >>> format_date_range("2020-01", "", True)
        '2020-01 - Present'
    """
    end_label = "Present" if current else end
    if start and end_label:
        return f"{start} - {end_label}"
    return start or end_label or ""


def flatten_resume(content: "ResumeContent") -> List[ContentBlock]:
    """
    Flatten resume content into blocks in canonical order.

    Args:
        content: Resume content (personal info, summary, experience, ...)

    Returns:
        Fresh list of immutable blocks; the header is always first
    """
    info = content.personal_info
    blocks: List[ContentBlock] = [
        HeaderBlock(
            name=info.name,
            title=info.title,
            email=info.email,
            phone=info.phone,
            location=info.location,
        )
    ]

    for section in SECTION_ORDER:
        section_blocks = _section_blocks(content, section)
        if section_blocks:
            blocks.append(SectionTitleBlock(title=SECTION_TITLES[section], section=section))
            blocks.extend(section_blocks)

    return blocks


def _section_blocks(content: "ResumeContent", section: str) -> List[ContentBlock]:
    if section == "summary":
        if not content.summary or not content.summary.strip():
            return []
        return [SummaryBlock(text=content.summary)]

    if section == "experience":
        return [
            JobBlock(
                company=job.company,
                position=job.position,
                dates=format_date_range(job.start_date, job.end_date, job.current),
                bullets=tuple(job.description),
            )
            for job in content.experience
        ]

    if section == "education":
        return [
            EducationBlock(
                school=edu.school,
                degree=edu.degree,
                field_of_study=edu.field,
                date=edu.graduation_date,
                gpa=edu.gpa or None,
            )
            for edu in content.education
        ]

    if section == "skills":
        if not content.skills:
            return []
        return [SkillsBlock(skills=tuple(content.skills))]

    return []
