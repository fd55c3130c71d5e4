"""Tests for settings and logging setup."""

import logging

from formcheck.core import Settings, configure_logging, get_settings


def test_defaults():
    settings = Settings()
    assert settings.invalid_field_class == "fieldErrorBorder"
    assert settings.invalid_label_class == "fieldErrorText"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("INVALID_FIELD_CLASS", "is-invalid")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.invalid_field_class == "is-invalid"
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_level():
    configure_logging("debug")
    logger = logging.getLogger("formcheck")
    assert logger.level == logging.DEBUG
    handlers = len(logger.handlers)
    configure_logging("warning")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == handlers
