"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from claudenv.core.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CLAUDENV_SCAN_MAX_DEPTH", raising=False)
        settings = Settings(_env_file=None)
        assert settings.scan_max_depth == 3
        assert "node_modules" in settings.scan_ignore_dirs
        assert settings.debug is False
        assert settings.log_json is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CLAUDENV_SCAN_MAX_DEPTH", "5")
        monkeypatch.setenv("CLAUDENV_DEBUG", "true")
        settings = get_settings()
        assert settings.scan_max_depth == 5
        assert settings.debug is True

    def test_ignore_dirs_from_json(self, monkeypatch):
        monkeypatch.setenv("CLAUDENV_SCAN_IGNORE_DIRS", '["dist", "build"]')
        assert Settings(_env_file=None).scan_ignore_dirs == ["dist", "build"]

    def test_depth_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("CLAUDENV_SCAN_MAX_DEPTH", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
