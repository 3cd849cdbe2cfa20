"""
API utilities for the resume layout tooling.

Contains:
- pdf_export: Resume PDF export via pdf-service
"""

from src.api.pdf_export import PDFExportError, ResumePDFExporter

__all__ = ["PDFExportError", "ResumePDFExporter"]
