"""Tests for CLI settings."""

import pytest

from envloader.core.config import CliSettings, load_cli_settings


def test_cli_settings_defaults() -> None:
    settings = CliSettings()

    assert settings.env_file == ".env"
    assert settings.log_level == "WARNING"


def test_load_cli_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENVLOADER_ENV_FILE", raising=False)
    monkeypatch.delenv("ENVLOADER_LOG_LEVEL", raising=False)

    settings = load_cli_settings()

    assert settings.env_file == ".env"
    assert settings.log_level == "WARNING"


def test_load_cli_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVLOADER_ENV_FILE", " config/app.env ")
    monkeypatch.setenv("ENVLOADER_LOG_LEVEL", "debug")

    settings = load_cli_settings()

    assert settings.env_file == "config/app.env"
    assert settings.log_level == "DEBUG"


def test_load_cli_settings_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVLOADER_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="ENVLOADER_LOG_LEVEL must be one of"):
        load_cli_settings()


def test_load_cli_settings_empty_env_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVLOADER_ENV_FILE", "   ")

    with pytest.raises(ValueError, match="ENVLOADER_ENV_FILE must not be empty"):
        load_cli_settings()
