"""
PDF Service - Dedicated service for resume pagination and PDF generation.

This service paginates resumes with the layout engine and renders the page
frames to PDF using Playwright/Chromium. Separated from the editor for
better scalability and resource management.
"""

__version__ = "0.1.0"
