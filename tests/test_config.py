"""Unit tests for update_env.config."""

import pytest
from pydantic import ValidationError

from update_env.config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.default_file == ".env"
        assert s.log_level == "WARNING"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("UPDATE_ENV_DEFAULT_FILE", "prod.env")
        monkeypatch.setenv("UPDATE_ENV_LOG_LEVEL", "debug")
        s = Settings()
        assert s.default_file == "prod.env"
        assert s.log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("UPDATE_ENV_DEFAULT_FILE", "other.env")
        get_settings.cache_clear()
        second = get_settings()
        assert second is not first
        assert second.default_file == "other.env"
