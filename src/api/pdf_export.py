"""
PDF export for resumes.

Paginates the resume locally, renders the page frames to HTML with the
selected template, and sends the document to pdf-service for rendering.
"""

import logging
from typing import Optional

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from src.common.config import Config
from src.layout import LayoutResult, run_layout
from src.resume.schema import ResumeSchema
from src.resume.templates import get_default_template_id, get_template

logger = logging.getLogger(__name__)


class PDFExportError(Exception):
    """PDF service rejected the request, timed out, or is unavailable."""


class ResumePDFExporter:
    """Generate resume PDFs via pdf-service."""

    def __init__(
        self,
        pdf_service_url: str = None,
        timeout: float = None,
        scale_to_font: bool = None,
    ):
        self.pdf_service_url = (pdf_service_url or Config.PDF_SERVICE_URL).rstrip("/")
        self.timeout = timeout or Config.PDF_EXPORT_TIMEOUT
        self.scale_to_font = Config.SCALE_HEIGHTS_TO_FONT if scale_to_font is None else scale_to_font

    def paginate(self, resume: ResumeSchema) -> LayoutResult:
        """
        Run the layout engine for a resume.

        Raises:
            InvalidFormatError: If margins leave no content area
        """
        return run_layout(resume.format, resume.content, scale_to_font=self.scale_to_font)

    def build_resume_html(self, resume: ResumeSchema, template_id: Optional[str] = None) -> str:
        """
        Build the paged HTML document for a resume.

        Args:
            resume: Resume document
            template_id: Template id (default template when None)

        Returns:
            HTML string ready for PDF rendering

        Raises:
            ValueError: If the template id is unknown
            InvalidFormatError: If margins leave no content area
        """
        from pdf_service.pdf_helpers import build_paged_html

        template_id = template_id or get_default_template_id()
        template = get_template(template_id)
        if template is None:
            raise ValueError(f"Unknown template: {template_id}")

        result = self.paginate(resume)
        return build_paged_html(result, template)

    def export_to_pdf(self, resume: ResumeSchema, template_id: Optional[str] = None) -> bytes:
        """
        Export a resume as PDF via pdf-service.

        The page size string of the resume format is passed through unchanged.

        Args:
            resume: Resume document
            template_id: Template id (default template when None)

        Returns:
            PDF binary content

        Raises:
            PDFExportError: If the service fails, times out, or is unreachable
        """
        html = self.build_resume_html(resume, template_id)
        payload = {
            "html": html,
            "pageSize": resume.format.page_size.value,
            "printBackground": True,
        }

        try:
            response = self._post_render(payload)
        except requests.exceptions.Timeout:
            logger.error("PDF service timeout")
            raise PDFExportError("PDF service timeout - please try again")
        except requests.exceptions.ConnectionError:
            logger.error("PDF service unavailable")
            raise PDFExportError("PDF service unavailable")

        if response.status_code != 200:
            logger.error(f"PDF service error: {response.status_code} - {response.text[:200]}")
            raise PDFExportError(f"PDF service error: {response.status_code}")

        logger.info(f"Resume PDF exported ({len(response.content)} bytes)")
        return response.content

    @retry(
        retry=retry_if_exception_type(requests.exceptions.ConnectionError),
        stop=stop_after_attempt(Config.PDF_EXPORT_RETRIES),
        wait=wait_exponential(min=1, max=5),
        reraise=True,
    )
    def _post_render(self, payload: dict) -> requests.Response:
        return requests.post(
            f"{self.pdf_service_url}/render-pdf",
            json=payload,
            timeout=self.timeout,
        )
