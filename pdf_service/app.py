"""
PDF Service - FastAPI application for resume pagination and PDF generation.

Provides endpoints for computing layout measurements and page partitions,
and for converting HTML or a resume document to PDF using Playwright/Chromium.
"""

import asyncio
import logging
import uuid
from datetime import datetime
from io import BytesIO
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from pydantic import BaseModel, Field

from pdf_service.config import get_settings, log_settings
from src.common.config import Config
from src.common.logger import get_logger, setup_logging
from src.layout import InvalidFormatError, ResumeFormat, calculate_layout, run_layout
from src.layout.units import resolve_page_size
from src.resume.schema import ResumeSchema
from src.resume.templates import get_all_templates, get_default_template_id, get_template

setup_logging(Config.LOG_LEVEL, Config.LOG_FORMAT)
logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="PDF Service",
    version="0.1.0",
    description="Resume pagination and PDF generation service using Playwright/Chromium"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

MAX_CONCURRENT_PDFS = settings.max_concurrent_pdfs
PLAYWRIGHT_TIMEOUT = settings.playwright_timeout  # milliseconds
PLAYWRIGHT_HEADLESS = settings.playwright_headless

# Semaphore for rate limiting
_pdf_semaphore = asyncio.Semaphore(MAX_CONCURRENT_PDFS)

# Playwright readiness state
_playwright_ready = False
_playwright_error: Optional[str] = None


# ============================================================================
# Startup Event - Validate Playwright
# ============================================================================

@app.on_event("startup")
async def validate_playwright_on_startup():
    """
    Validate Playwright/Chromium is properly installed on startup.

    This ensures the service won't report as healthy if Playwright can't
    actually generate PDFs.
    """
    global _playwright_ready, _playwright_error

    log_settings(settings)
    logger.info("PDF Service starting - validating Playwright installation...")

    try:
        from playwright.async_api import async_playwright

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=PLAYWRIGHT_HEADLESS)
            page = await browser.new_page()
            await page.set_content("<html><body><h1>Test</h1></body></html>")
            test_pdf = await page.pdf(format="A4")
            await browser.close()

            if len(test_pdf) > 0:
                _playwright_ready = True
                logger.info(f"Playwright validation successful - generated {len(test_pdf)} byte test PDF")
            else:
                _playwright_error = "Test PDF generation returned empty result"
                logger.error(f"Playwright validation failed: {_playwright_error}")

    except Exception as e:
        _playwright_error = str(e)
        logger.error(f"Playwright validation failed: {_playwright_error}")
        logger.error("PDF generation will not work until this is resolved.")


# ============================================================================
# Request/Response Models
# ============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    timestamp: datetime
    active_renders: int
    max_concurrent: int
    playwright_ready: bool = True
    playwright_error: Optional[str] = None


class RenderPDFRequest(BaseModel):
    """Generic HTML/CSS to PDF request."""
    html: str = Field(..., description="HTML content to render")
    css: Optional[str] = Field(None, description="Additional CSS styles")
    pageSize: str = Field("A4", description="Page size: 'A4' or 'Letter'")
    printBackground: bool = Field(True, description="Print background colors/images")


class LayoutRequest(BaseModel):
    """Format configuration to measure."""
    format: ResumeFormat = Field(default_factory=ResumeFormat)


class PaginateRequest(BaseModel):
    """Resume document to paginate."""
    resume: ResumeSchema
    scaleToFont: bool = Field(False, description="Scale heuristic heights by font size")


class ResumeToPDFRequest(BaseModel):
    """Resume document to paginate, render with a template, and export."""
    resume: ResumeSchema
    templateId: Optional[str] = Field(None, description="Template id (default: classic)")
    filename: Optional[str] = Field(None, description="Download filename")
    scaleToFont: bool = Field(False, description="Scale heuristic heights by font size")
    showPageNumbers: bool = Field(False, description="Print page numbers in each frame")


# ============================================================================
# Rendering
# ============================================================================

def _active_renders() -> int:
    return MAX_CONCURRENT_PDFS - _pdf_semaphore._value


async def _render_with_playwright(html: str, page_format: str, print_background: bool = True) -> bytes:
    """Render a complete HTML document to PDF bytes with zero page margins."""
    from playwright.async_api import async_playwright

    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=PLAYWRIGHT_HEADLESS)
        try:
            page = await browser.new_page()
            page.set_default_timeout(PLAYWRIGHT_TIMEOUT)
            await page.set_content(html, wait_until="networkidle")
            return await page.pdf(
                format=page_format,
                print_background=print_background,
                margin={"top": "0", "right": "0", "bottom": "0", "left": "0"},
            )
        finally:
            await browser.close()


def _check_capacity(log) -> None:
    if _pdf_semaphore._value <= 0:
        log.warning("PDF service overloaded, rejecting request")
        raise HTTPException(
            status_code=503,
            detail="Service overloaded. Too many concurrent PDF operations."
        )


# ============================================================================
# Health Check Endpoint
# ============================================================================

@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint for container orchestration.

    Returns service status, capacity information, and Playwright readiness.
    Returns HTTP 503 if Playwright validation failed on startup.
    """
    if not _playwright_ready:
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "timestamp": datetime.utcnow().isoformat(),
                "active_renders": _active_renders(),
                "max_concurrent": MAX_CONCURRENT_PDFS,
                "playwright_ready": False,
                "playwright_error": _playwright_error,
                "message": "PDF service is unhealthy - Playwright/Chromium not available"
            }
        )

    return HealthResponse(
        status="healthy",
        timestamp=datetime.utcnow(),
        active_renders=_active_renders(),
        max_concurrent=MAX_CONCURRENT_PDFS,
        playwright_ready=True,
        playwright_error=None
    )


# ============================================================================
# Layout Endpoints
# ============================================================================

@app.get("/templates")
async def list_templates():
    """List available resume templates."""
    return {
        "default": get_default_template_id(),
        "templates": [template.to_dict() for template in get_all_templates()],
    }


@app.post("/layout")
async def layout(request: LayoutRequest):
    """
    Compute layout measurements for a format configuration.

    Raises:
        HTTPException: 422 if margins leave no content area
    """
    measurements = calculate_layout(request.format)
    if not measurements.is_valid:
        raise HTTPException(
            status_code=422,
            detail={"message": "Margins leave no content area", "layout": measurements.to_dict()}
        )
    return measurements.to_dict()


@app.post("/paginate")
async def paginate_resume(request: PaginateRequest):
    """
    Compute the page partition for a resume.

    Raises:
        HTTPException: 422 if margins leave no content area
    """
    try:
        result = run_layout(
            request.resume.format,
            request.resume.content,
            scale_to_font=request.scaleToFont,
        )
    except InvalidFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return result.to_dict()


# ============================================================================
# PDF Generation Endpoints
# ============================================================================

@app.post("/render-pdf")
async def render_pdf(request: RenderPDFRequest):
    """
    Generic HTML/CSS to PDF endpoint.

    Converts arbitrary HTML content to PDF with specified page settings.

    Args:
        request: HTML content, CSS, and page settings

    Returns:
        StreamingResponse with PDF binary data

    Raises:
        HTTPException: 400 for invalid input, 500 for rendering failures, 503 for overload
    """
    if not request.html or not request.html.strip():
        raise HTTPException(status_code=400, detail="HTML content is required")

    try:
        page_format = resolve_page_size(request.pageSize).value
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    log = get_logger(__name__, request_id=uuid.uuid4().hex, stage="render", page_size=page_format)
    _check_capacity(log)

    async with _pdf_semaphore:
        try:
            from pdf_service.pdf_helpers import wrap_html_with_css

            log.info("Starting generic PDF render")

            full_html = wrap_html_with_css(request.html, request.css)
            pdf_bytes = await _render_with_playwright(full_html, page_format, request.printBackground)

            log.info(f"Generic PDF render completed ({len(pdf_bytes)} bytes)")

            return StreamingResponse(
                BytesIO(pdf_bytes),
                media_type="application/pdf",
                headers={"Content-Disposition": 'attachment; filename="document.pdf"'}
            )

        except (asyncio.TimeoutError, PlaywrightTimeoutError):
            log.error("PDF rendering timed out")
            raise HTTPException(
                status_code=500,
                detail=f"Rendering timed out after {PLAYWRIGHT_TIMEOUT}ms"
            )
        except Exception as e:
            log.error(f"PDF rendering failed: {str(e)}")
            raise HTTPException(status_code=500, detail=f"Rendering failed: {str(e)}")


@app.post("/resume-to-pdf")
async def resume_to_pdf(request: ResumeToPDFRequest):
    """
    Paginate a resume, render it with a template, and convert it to PDF.

    The PDF page format is the resume's page size, unchanged, so the page
    frames computed by the paginator map one-to-one onto PDF pages.

    Returns:
        StreamingResponse with PDF binary data

    Raises:
        HTTPException: 400 for an unknown template, 422 for an invalid format,
            500 for rendering failures, 503 for overload
    """
    template_id = request.templateId or get_default_template_id()
    template = get_template(template_id)
    if template is None:
        raise HTTPException(status_code=400, detail=f"Unknown template: {template_id}")

    log = get_logger(__name__, request_id=uuid.uuid4().hex, stage="layout")

    try:
        result = run_layout(
            request.resume.format,
            request.resume.content,
            scale_to_font=request.scaleToFont,
        )
    except InvalidFormatError as e:
        log.warning(f"Rejected resume format: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    _check_capacity(log)

    async with _pdf_semaphore:
        try:
            from pdf_service.pdf_helpers import (
                build_paged_html,
                build_resume_filename,
                sanitize_for_path,
            )

            page_format = result.layout.page_size.value
            log = log.bind(stage="render", template=template.id, page_size=page_format)
            log.info(f"Rendering {result.page_count} page(s)")

            full_html = build_paged_html(result, template, show_page_numbers=request.showPageNumbers)
            pdf_bytes = await _render_with_playwright(full_html, page_format)

            if request.filename:
                stem = request.filename.removesuffix(".pdf")
                filename = f"{sanitize_for_path(stem)}.pdf"
            else:
                filename = build_resume_filename(request.resume.content.personal_info.name)
            log.info(f"Resume PDF generation completed: {filename}")

            return StreamingResponse(
                BytesIO(pdf_bytes),
                media_type="application/pdf",
                headers={
                    "Content-Disposition": f'attachment; filename="{filename}"',
                    "X-Page-Count": str(result.page_count),
                }
            )

        except (asyncio.TimeoutError, PlaywrightTimeoutError):
            log.error("Resume PDF rendering timed out")
            raise HTTPException(
                status_code=500,
                detail=f"Rendering timed out after {PLAYWRIGHT_TIMEOUT}ms"
            )
        except Exception as e:
            log.error(f"Resume PDF generation failed: {str(e)}")
            raise HTTPException(status_code=500, detail=f"PDF generation failed: {str(e)}")
