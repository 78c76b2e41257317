"""Tests for settings and logging configuration."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from deferset.config import LoggingSettings, ManagerSettings, configure_logging, is_configured


def test_manager_settings_defaults(monkeypatch):
    monkeypatch.delenv("DEFERSET_ID_ATTRIBUTE", raising=False)

    assert ManagerSettings().id_attribute == "id"


def test_manager_settings_from_env(monkeypatch):
    monkeypatch.setenv("DEFERSET_ID_ATTRIBUTE", "pk")

    assert ManagerSettings().id_attribute == "pk"


def test_logging_settings_from_env(monkeypatch):
    monkeypatch.setenv("DEFERSET_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DEFERSET_LOG_FORMAT", "json")

    settings = LoggingSettings()

    assert settings.level == "DEBUG"
    assert settings.format == "json"


def test_logging_settings_reject_unknown_format():
    with pytest.raises(ValidationError):
        LoggingSettings(format="xml")


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_configure_logging_sets_level(reset_structlog):
    configure_logging(LoggingSettings(level="DEBUG", format="json"), force=True)

    assert is_configured()
    assert logging.getLogger("deferset").level == logging.DEBUG


def test_configure_logging_is_idempotent_without_force(reset_structlog):
    configure_logging(LoggingSettings(level="ERROR"), force=True)
    configure_logging(LoggingSettings(level="DEBUG"))

    assert logging.getLogger("deferset").level == logging.ERROR
