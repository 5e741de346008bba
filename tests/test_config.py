"""Tests for settings and logging configuration."""

import json
import logging

import pytest
from pydantic import ValidationError

from exprcheck.config import Settings, get_settings
from exprcheck.logging import (
    StructuredFormatter,
    TextFormatter,
    get_context_logger,
    setup_logging,
)


class TestSettings:
    """Test Settings defaults and environment overrides."""

    def test_defaults(self):
        """Test the default settings."""
        settings = Settings()
        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_FORMAT == "text"
        assert settings.LOG_FILE is None
        assert settings.CHECK_END is False
        assert settings.OUTPUT_FORMAT == "text"

    def test_environment(self, monkeypatch):
        """Test EXPRCHECK_* variables."""
        monkeypatch.setenv("EXPRCHECK_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("EXPRCHECK_OUTPUT_FORMAT", "json")
        settings = get_settings()
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.OUTPUT_FORMAT == "json"

    def test_env_file(self, tmp_path):
        """Test reading a .env file from the working directory."""
        (tmp_path / ".env").write_text("EXPRCHECK_CHECK_END=1\n")
        assert Settings().CHECK_END is True

    def test_cached(self):
        """Test that get_settings() returns one instance."""
        assert get_settings() is get_settings()

    def test_invalid_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(ValidationError):
            Settings(OUTPUT_FORMAT="xml")


class TestLogging:
    """Test setup_logging() and the formatters."""

    def test_text_setup(self, restore_logging):
        """Test the default text configuration."""
        setup_logging(Settings(LOG_LEVEL="info"))
        assert restore_logging.level == logging.INFO
        assert isinstance(restore_logging.handlers[0].formatter, TextFormatter)

    def test_json_setup_with_file(self, restore_logging, tmp_path):
        """Test JSON output to an extra log file."""
        log_file = tmp_path / "logs" / "exprcheck.log"
        setup_logging(Settings(LOG_FORMAT="json", LOG_FILE=str(log_file), LOG_LEVEL="INFO"))

        get_context_logger("exprcheck.test", run="1").info("hello", context={"n": 2})
        for handler in restore_logging.handlers:
            handler.flush()

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["message"] == "hello"
        assert record["level"] == "INFO"
        assert record["run"] == "1"
        assert record["n"] == 2

    def test_unknown_level_falls_back(self, restore_logging):
        """Test that an unknown level name means WARNING."""
        setup_logging(Settings(LOG_LEVEL="chatty"))
        assert restore_logging.level == logging.WARNING

    def test_structured_formatter_exception(self):
        """Test that exception info is serialized."""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys

            record = logging.LogRecord(
                "exprcheck", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )
        data = json.loads(StructuredFormatter().format(record))
        assert data["message"] == "failed"
        assert "RuntimeError: boom" in data["exception"]

    def test_text_formatter_appends_context(self):
        """Test that context pairs follow the message in text output."""
        record = logging.LogRecord("exprcheck", logging.INFO, __file__, 1, "parsed", None, None)
        record.context = {"expression": "1+", "valid": False}
        line = TextFormatter().format(record)
        assert line.endswith("exprcheck: parsed expression='1+' valid=False")

    def test_text_formatter_without_context(self):
        """Test records logged through a plain logger."""
        record = logging.LogRecord("exprcheck", logging.INFO, __file__, 1, "plain", None, None)
        assert TextFormatter().format(record).endswith("exprcheck: plain")
