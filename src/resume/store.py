"""
Editor state and its pure update functions.

The state is passed down explicitly; every update returns a new EditorState
and leaves the old one untouched. The layout engine never reads the state;
callers hand it ``state.resume.format`` and ``state.resume.content``.

Partial updates use snake_case field names and are re-validated, so an edit
cannot produce, e.g., a negative font size.
"""

import logging
from typing import Any, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from src.resume.schema import ResumeSchema, default_resume
from src.resume.templates import get_default_template_id, get_template, is_valid_template_id

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class EditorState(BaseModel):
    """Current resume document plus the selected template."""
    model_config = ConfigDict(frozen=True)

    resume: ResumeSchema
    selected_template_id: str


def _merge(model: M, changes: Mapping[str, Any]) -> M:
    """Return a validated copy of ``model`` with ``changes`` applied."""
    model_cls: Type[M] = type(model)
    unknown = set(changes) - set(model_cls.model_fields)
    if unknown:
        raise ValueError(f"Unknown {model_cls.__name__} fields: {', '.join(sorted(unknown))}")
    data: Dict[str, Any] = model.model_dump()
    data.update(changes)
    return model_cls.model_validate(data)


def initial_state() -> EditorState:
    return EditorState(resume=default_resume(), selected_template_id=get_default_template_id())


def update_content(state: EditorState, changes: Mapping[str, Any]) -> EditorState:
    """Apply a partial update to the resume content."""
    content = _merge(state.resume.content, changes)
    return state.model_copy(update={"resume": state.resume.model_copy(update={"content": content})})


def update_format(state: EditorState, changes: Mapping[str, Any]) -> EditorState:
    """Apply a partial update to the format configuration."""
    fmt = _merge(state.resume.format, changes)
    return state.model_copy(update={"resume": state.resume.model_copy(update={"format": fmt})})


def update_personal_info(state: EditorState, changes: Mapping[str, Any]) -> EditorState:
    personal_info = _merge(state.resume.content.personal_info, changes)
    return update_content(state, {"personal_info": personal_info.model_dump()})


def update_summary(state: EditorState, summary: str) -> EditorState:
    return update_content(state, {"summary": summary})


def set_template(state: EditorState, template_id: str) -> EditorState:
    """
    Select a template and apply its default format settings.

    Unknown template ids are logged and leave the state unchanged.
    """
    if not is_valid_template_id(template_id):
        logger.warning(f"Invalid template ID: {template_id}")
        return state

    template = get_template(template_id)
    fmt = _merge(state.resume.format, template.default_format)
    return EditorState(
        resume=state.resume.model_copy(update={"format": fmt}),
        selected_template_id=template_id,
    )


def reset_to_default() -> EditorState:
    """Discard all edits and return to the sample resume."""
    return initial_state()
