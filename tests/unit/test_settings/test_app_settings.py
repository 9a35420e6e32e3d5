"""Unit tests for application settings."""

import logging

import pytest
from pydantic import ValidationError

from src.settings import AppSettings, get_settings


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults apply when no environment is set."""
        for var in ("SUBMODULES_LOG_LEVEL", "SUBMODULES_LOG_JSON", "SUBMODULES_REPO_ROOT"):
            monkeypatch.delenv(var, raising=False)

        settings = AppSettings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.repo_root is None
        assert settings.log_level_number == logging.INFO

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """SUBMODULES_ variables override defaults."""
        monkeypatch.setenv("SUBMODULES_LOG_LEVEL", "debug")
        monkeypatch.setenv("SUBMODULES_LOG_JSON", "false")
        monkeypatch.setenv("SUBMODULES_REPO_ROOT", "/srv/repo")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG
        assert settings.log_json is False
        assert settings.repo_root == "/srv/repo"

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown log levels are rejected."""
        monkeypatch.setenv("SUBMODULES_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)
