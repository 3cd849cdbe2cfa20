"""
Configuration loader for the resume layout tooling.

Loads settings from environment variables (.env file) for the export client
and the CLI. The PDF service has its own pydantic-settings model in
pdf_service/config.py.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Centralized configuration for the export client and scripts.

    All values loaded from environment variables.
    """

    # ===== PDF Service =====
    PDF_SERVICE_URL: str = os.getenv("PDF_SERVICE_URL", "http://localhost:8001")
    PDF_EXPORT_TIMEOUT: float = float(os.getenv("PDF_EXPORT_TIMEOUT", "30"))  # seconds
    PDF_EXPORT_RETRIES: int = int(os.getenv("PDF_EXPORT_RETRIES", "3"))

    # ===== Layout =====
    DEFAULT_TEMPLATE_ID: str = os.getenv("DEFAULT_TEMPLATE_ID", "classic")
    # Scale heuristic block heights by font size / 11pt
    SCALE_HEIGHTS_TO_FONT: bool = os.getenv("SCALE_HEIGHTS_TO_FONT", "false").lower() == "true"

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "simple")  # simple | json

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration values.
        Raises ValueError if a setting is malformed.
        """
        from src.resume.templates import is_valid_template_id

        if not cls.PDF_SERVICE_URL.startswith(("http://", "https://")):
            raise ValueError(f"Invalid PDF_SERVICE_URL: {cls.PDF_SERVICE_URL}")

        if cls.PDF_EXPORT_TIMEOUT <= 0:
            raise ValueError("PDF_EXPORT_TIMEOUT must be positive")

        if cls.PDF_EXPORT_RETRIES < 1:
            raise ValueError("PDF_EXPORT_RETRIES must be at least 1")

        if not is_valid_template_id(cls.DEFAULT_TEMPLATE_ID):
            raise ValueError(f"Unknown DEFAULT_TEMPLATE_ID: {cls.DEFAULT_TEMPLATE_ID}")

        if cls.LOG_FORMAT not in ("simple", "json"):
            raise ValueError(f"LOG_FORMAT must be 'simple' or 'json', got {cls.LOG_FORMAT!r}")

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        return f"""
Configuration Summary:
  PDF service: {cls.PDF_SERVICE_URL} (timeout {cls.PDF_EXPORT_TIMEOUT}s, {cls.PDF_EXPORT_RETRIES} attempts)
  Default template: {cls.DEFAULT_TEMPLATE_ID}
  Font-scaled heights: {'Enabled' if cls.SCALE_HEIGHTS_TO_FONT else 'Disabled'}
  Logging: {cls.LOG_LEVEL} ({cls.LOG_FORMAT})
"""
