"""Root conftest - shared test configuration.

Invariants:
    - DB_* variables cleared before every test: each test declares its own environment
    - get_settings cache cleared around every test
    - .env in the working directory never leaks into Settings
"""

import pytest

from app.config import Settings, get_settings

DB_KEYS = ("DB_HOST", "DB_PORT", "DB_USERNAME", "DB_PASSWORD", "DB_NAME")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in DB_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def db_env(monkeypatch):
    """Minimal valid database environment (DB_PORT unset)."""
    env = {
        "DB_HOST": "db",
        "DB_USERNAME": "u",
        "DB_PASSWORD": "p",
        "DB_NAME": "app",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    return env
