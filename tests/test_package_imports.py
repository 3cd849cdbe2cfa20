"""
Verify package imports work correctly.

These tests ensure the package is properly installed and modules
can be imported. Critical for catching setup.py/installation issues
in CI environments.
"""


def test_pdf_service_package_structure():
    """Verify pdf_service package has expected structure."""
    import importlib
    spec = importlib.util.find_spec('pdf_service')
    assert spec is not None, "pdf_service should be importable (package must be installed)"


def test_pdf_helpers_can_be_imported():
    """Verify pdf_helpers module can be imported with all functions."""
    from pdf_service.pdf_helpers import (
        sanitize_for_path,
        build_paged_html,
        render_block_html,
    )
    assert callable(sanitize_for_path)
    assert callable(build_paged_html)
    assert callable(render_block_html)


def test_pdf_service_app_can_be_imported():
    """Verify PDF service FastAPI app can be imported."""
    from pdf_service.app import app
    assert app is not None
    assert hasattr(app, 'routes')


def test_layout_public_api():
    """Verify the layout engine exports its public API."""
    import src.layout as layout
    for name in layout.__all__:
        assert hasattr(layout, name), f"src.layout is missing {name}"


def test_resume_and_api_packages_import():
    """Verify resume and export client packages import without cycles."""
    from src.resume import EditorState, ResumeSchema, get_template
    from src.api import ResumePDFExporter
    assert EditorState and ResumeSchema and get_template and ResumePDFExporter


def test_version_module():
    from version import __version__
    assert __version__ == "0.1.0"
