"""Tests for core configuration module."""

import pytest

from openbird_webhooks.core.config import Settings, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that settings have correct default values."""
    for var in ["APP_NAME", "WEBHOOK_HOST", "WEBHOOK_PORT", "WEBHOOK_PATH", "MESSAGE_PATTERN"]:
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)  # type: ignore

    assert settings.app_name == "openbird-webhooks"
    assert settings.app_env == "development"
    assert settings.webhook_host == "0.0.0.0"
    assert settings.webhook_port is None
    assert settings.webhook_path == "/"
    assert settings.message_pattern == "im.message.*"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that receiver settings are read from the environment."""
    monkeypatch.setenv("WEBHOOK_PORT", "3000")
    monkeypatch.setenv("WEBHOOK_PATH", "/openbird")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)  # type: ignore

    assert settings.webhook_port == 3000
    assert settings.webhook_path == "/openbird"
    assert settings.log_level == "debug"


def test_get_settings_cached() -> None:
    """Test that get_settings returns cached instance."""
    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
