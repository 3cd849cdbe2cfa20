"""
Resume document, templates, and editor state.

Contains:
- schema: pydantic models for the resume document and the sample resume
- templates: template registry (classic, modern)
- store: EditorState with pure update functions
"""

from src.resume.schema import (
    Education,
    PersonalInfo,
    ResumeContent,
    ResumeSchema,
    WorkExperience,
    default_resume,
)
from src.resume.store import EditorState, initial_state
from src.resume.templates import ResumeTemplate, get_template

__all__ = [
    "Education",
    "PersonalInfo",
    "ResumeContent",
    "ResumeSchema",
    "WorkExperience",
    "default_resume",
    "EditorState",
    "initial_state",
    "ResumeTemplate",
    "get_template",
]
