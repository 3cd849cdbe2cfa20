"""
Global fixtures for the test suite.

Sets a known environment before any project module is imported so the
pydantic-settings model of the PDF service validates, and makes the project
root importable when the package is not installed in editable mode.
"""

import os
import sys
from pathlib import Path

import pytest

# Set test environment BEFORE any imports to prevent settings from loading real values
os.environ["ENVIRONMENT"] = "development"
os.environ.setdefault("CORS_ORIGINS", "*")

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def sample_resume():
    """The sample resume the editor starts from."""
    from src.resume.schema import default_resume
    return default_resume()


@pytest.fixture
def empty_resume():
    """Resume with no content at all (header block only)."""
    from src.resume.schema import ResumeSchema
    return ResumeSchema()
