"""Tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from finanalyzer.core.config import AnalyzerSettings, get_settings
from finanalyzer.dependencies import build_view_controller


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANALYZER_API_BASE_URL", "https://analysis.example.com/")
    monkeypatch.setenv("ANALYZER_POLL_INTERVAL_SECONDS", "0.5")
    monkeypatch.setenv("ANALYZER_LOG_LEVEL", "debug")

    settings = AnalyzerSettings()

    assert settings.base_url == "https://analysis.example.com"
    assert settings.poll_interval_seconds == 0.5
    assert settings.log_level == "DEBUG"


def test_defaults_apply_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "ANALYZER_API_BASE_URL",
        "ANALYZER_POLL_INTERVAL_SECONDS",
        "ANALYZER_REQUEST_TIMEOUT_SECONDS",
        "ANALYZER_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = AnalyzerSettings(_env_file=None)

    assert settings.base_url == "http://localhost:8000"
    assert settings.poll_interval_seconds == 2.0
    assert settings.request_timeout_seconds == 30.0
    assert settings.log_level == "INFO"


def test_poll_interval_must_be_positive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANALYZER_POLL_INTERVAL_SECONDS", "0")

    with pytest.raises(ValidationError):
        AnalyzerSettings()


def test_invalid_base_url_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANALYZER_API_BASE_URL", "not a url")

    with pytest.raises(ValidationError):
        AnalyzerSettings()


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()


def test_build_view_controller_uses_injected_settings() -> None:
    settings = AnalyzerSettings(
        api_base_url="https://analysis.example.com",
        poll_interval_seconds=0.25,
    )

    controller = build_view_controller(settings)

    assert controller.poller.status.value == "idle"
    assert controller.mode.value == "collecting"
