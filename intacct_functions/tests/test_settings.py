"""Tests for environment-driven settings."""

from __future__ import annotations

from intacct_functions.config import FunctionSettings, get_settings
from intacct_functions.config.defaults import CONTROLID_TIMESTAMP_FORMAT


def test_defaults(monkeypatch):
    monkeypatch.delenv("INTACCT_FUNCTIONS_CONTROLID_FORMAT", raising=False)
    monkeypatch.delenv("INTACCT_FUNCTIONS_LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings == FunctionSettings()
    assert settings.controlid_timestamp_format == CONTROLID_TIMESTAMP_FORMAT
    assert settings.log_level == "INFO"


def test_env_overrides_refresh_cache(monkeypatch):
    monkeypatch.delenv("INTACCT_FUNCTIONS_CONTROLID_FORMAT", raising=False)
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("INTACCT_FUNCTIONS_CONTROLID_FORMAT", "%s")
    monkeypatch.setenv("INTACCT_FUNCTIONS_LOG_LEVEL", " debug ")
    updated = get_settings()
    assert updated is not first
    assert updated.controlid_timestamp_format == "%s"
    assert updated.log_level == "DEBUG"


def test_blank_env_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("INTACCT_FUNCTIONS_CONTROLID_FORMAT", "   ")
    assert get_settings().controlid_timestamp_format == CONTROLID_TIMESTAMP_FORMAT
