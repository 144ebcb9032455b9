import pytest

from update_env.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Drop cached settings and any UPDATE_ENV_* overrides from the outer environment."""
    monkeypatch.delenv("UPDATE_ENV_DEFAULT_FILE", raising=False)
    monkeypatch.delenv("UPDATE_ENV_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def env_path(tmp_path):
    return tmp_path / ".env"
