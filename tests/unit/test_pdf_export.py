"""
Unit tests for the resume PDF export client.

Tests cover:
- Request payload (paged HTML, page size passed through unchanged)
- Error mapping (timeout, connection error, non-200)
- Retry on connection errors
- Unknown templates and invalid formats
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from src.api.pdf_export import PDFExportError, ResumePDFExporter
from src.layout import InvalidFormatError, Margins, PageSize


@pytest.fixture
def exporter():
    return ResumePDFExporter(pdf_service_url="http://pdf-service:8001/", timeout=5)


@pytest.fixture(autouse=True)
def no_retry_wait():
    """Skip tenacity's exponential backoff between attempts."""
    with patch.object(ResumePDFExporter._post_render.retry, "sleep"):
        yield


def _ok_response(content=b"%PDF-1.4 resume"):
    response = MagicMock()
    response.status_code = 200
    response.content = content
    return response


class TestExportToPDF:
    """Tests for export_to_pdf."""

    @patch("src.api.pdf_export.requests.post")
    def test_posts_paged_html_to_render_endpoint(self, mock_post, exporter, sample_resume):
        # Arrange
        mock_post.return_value = _ok_response()

        # Act
        pdf_bytes = exporter.export_to_pdf(sample_resume, "modern")

        # Assert
        assert pdf_bytes == b"%PDF-1.4 resume"
        args, kwargs = mock_post.call_args
        assert args[0] == "http://pdf-service:8001/render-pdf"
        assert kwargs["timeout"] == 5
        payload = kwargs["json"]
        assert payload["pageSize"] == "A4"
        assert payload["printBackground"] is True
        assert payload["html"].count('class="page"') == 2
        assert "template-modern" in payload["html"]

    @patch("src.api.pdf_export.requests.post")
    def test_letter_page_size_is_passed_through(self, mock_post, exporter, sample_resume):
        mock_post.return_value = _ok_response()
        fmt = sample_resume.format.model_copy(update={"page_size": PageSize.LETTER})
        resume = sample_resume.model_copy(update={"format": fmt})

        exporter.export_to_pdf(resume)

        assert mock_post.call_args.kwargs["json"]["pageSize"] == "Letter"

    @patch("src.api.pdf_export.requests.post")
    def test_non_200_raises(self, mock_post, exporter, sample_resume):
        response = MagicMock(status_code=500, text="Rendering failed")
        mock_post.return_value = response

        with pytest.raises(PDFExportError, match="500"):
            exporter.export_to_pdf(sample_resume)

    @patch("src.api.pdf_export.requests.post")
    def test_timeout_raises_without_retry(self, mock_post, exporter, sample_resume):
        mock_post.side_effect = requests.exceptions.Timeout()

        with pytest.raises(PDFExportError, match="timeout"):
            exporter.export_to_pdf(sample_resume)

        assert mock_post.call_count == 1

    @patch("src.api.pdf_export.requests.post")
    def test_connection_error_is_retried_then_raises(self, mock_post, exporter, sample_resume):
        mock_post.side_effect = requests.exceptions.ConnectionError()

        with pytest.raises(PDFExportError, match="unavailable"):
            exporter.export_to_pdf(sample_resume)

        assert mock_post.call_count == 3

    @patch("src.api.pdf_export.requests.post")
    def test_connection_error_recovers_on_retry(self, mock_post, exporter, sample_resume):
        mock_post.side_effect = [requests.exceptions.ConnectionError(), _ok_response(b"%PDF")]

        assert exporter.export_to_pdf(sample_resume) == b"%PDF"
        assert mock_post.call_count == 2

    @patch("src.api.pdf_export.requests.post")
    def test_unknown_template_raises_before_request(self, mock_post, exporter, sample_resume):
        with pytest.raises(ValueError, match="Unknown template"):
            exporter.export_to_pdf(sample_resume, "creative")

        mock_post.assert_not_called()

    @patch("src.api.pdf_export.requests.post")
    def test_invalid_format_raises_before_request(self, mock_post, exporter, sample_resume):
        fmt = sample_resume.format.model_copy(
            update={"margins": Margins(top=500, right=20, bottom=500, left=20)}
        )
        resume = sample_resume.model_copy(update={"format": fmt})

        with pytest.raises(InvalidFormatError):
            exporter.export_to_pdf(resume)

        mock_post.assert_not_called()


class TestExporterConfig:
    """Tests for constructor defaults."""

    def test_defaults_come_from_config(self):
        from src.common.config import Config

        exporter = ResumePDFExporter()

        assert exporter.pdf_service_url == Config.PDF_SERVICE_URL.rstrip("/")
        assert exporter.timeout == Config.PDF_EXPORT_TIMEOUT
        assert exporter.scale_to_font == Config.SCALE_HEIGHTS_TO_FONT

    def test_paginate_uses_scale_setting(self, sample_resume):
        resume = sample_resume.model_copy(
            update={"format": sample_resume.format.model_copy(update={"font_size": 22})}
        )

        plain = ResumePDFExporter(scale_to_font=False).paginate(resume)
        scaled = ResumePDFExporter(scale_to_font=True).paginate(resume)

        assert scaled.page_count > plain.page_count
