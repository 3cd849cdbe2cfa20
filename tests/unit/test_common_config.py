"""
Unit tests for configuration loading and validation.
"""

import pytest

from src.common.config import Config


class TestConfigDefaults:
    """Tests for default values."""

    def test_types(self):
        assert isinstance(Config.PDF_SERVICE_URL, str)
        assert isinstance(Config.PDF_EXPORT_TIMEOUT, float)
        assert isinstance(Config.PDF_EXPORT_RETRIES, int)
        assert isinstance(Config.SCALE_HEIGHTS_TO_FONT, bool)

    def test_summary_mentions_service_and_template(self):
        summary = Config.summary()

        assert Config.PDF_SERVICE_URL in summary
        assert Config.DEFAULT_TEMPLATE_ID in summary


class TestConfigValidate:
    """Tests for Config.validate."""

    @pytest.fixture
    def valid_config(self, monkeypatch):
        monkeypatch.setattr(Config, "PDF_SERVICE_URL", "http://localhost:8001")
        monkeypatch.setattr(Config, "PDF_EXPORT_TIMEOUT", 30.0)
        monkeypatch.setattr(Config, "PDF_EXPORT_RETRIES", 3)
        monkeypatch.setattr(Config, "DEFAULT_TEMPLATE_ID", "classic")
        monkeypatch.setattr(Config, "LOG_FORMAT", "simple")

    def test_valid_config_passes(self, valid_config):
        Config.validate()

    @pytest.mark.parametrize("attr,value,message", [
        ("PDF_SERVICE_URL", "localhost:8001", "Invalid PDF_SERVICE_URL"),
        ("PDF_EXPORT_TIMEOUT", 0.0, "PDF_EXPORT_TIMEOUT"),
        ("PDF_EXPORT_RETRIES", 0, "PDF_EXPORT_RETRIES"),
        ("DEFAULT_TEMPLATE_ID", "creative", "Unknown DEFAULT_TEMPLATE_ID"),
        ("LOG_FORMAT", "xml", "LOG_FORMAT"),
    ])
    def test_invalid_values_raise(self, valid_config, monkeypatch, attr, value, message):
        monkeypatch.setattr(Config, attr, value)

        with pytest.raises(ValueError, match=message):
            Config.validate()
