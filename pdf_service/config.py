"""
PDF Service Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class PDFServiceSettings(BaseSettings):
    """
    PDF service configuration with validation.

    All settings can be overridden via environment variables
    (MAX_CONCURRENT_PDFS, PLAYWRIGHT_TIMEOUT, ...).
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    # === Concurrency & Limits ===
    max_concurrent_pdfs: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Maximum concurrent PDF renders (1-20)"
    )
    playwright_timeout: int = Field(
        default=30000,
        ge=1000,
        le=300000,
        description="Playwright page timeout in milliseconds"
    )
    playwright_headless: bool = Field(
        default=True,
        description="Launch Chromium headless"
    )

    # === Environment ===
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # === CORS ===
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        if not self.cors_origins:
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate_production_config(self) -> List[str]:
        """
        Validate configuration is suitable for production.

        Returns list of warning messages.
        """
        issues = []
        if self.is_production:
            if "*" in self.cors_origins_list:
                issues.append("WARNING: CORS_ORIGINS allows any origin in production")
            if not self.playwright_headless:
                issues.append("WARNING: PLAYWRIGHT_HEADLESS is disabled in production")
        return issues


@lru_cache()
def get_settings() -> PDFServiceSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached.
    """
    return PDFServiceSettings()


def log_settings(settings: PDFServiceSettings) -> None:
    """Log loaded configuration and any production warnings."""
    for issue in settings.validate_production_config():
        logger.warning(issue)

    logger.info(f"Configuration loaded: environment={settings.environment}")
    logger.info(f"  max_concurrent_pdfs={settings.max_concurrent_pdfs}")
    logger.info(f"  playwright_timeout={settings.playwright_timeout}ms")
    logger.info(f"  playwright_headless={settings.playwright_headless}")
