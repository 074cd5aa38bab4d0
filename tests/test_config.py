"""Настройки и выбор хранилища."""
import pytest

from collab_editor.core.config import Settings
from collab_editor.db.storage import MemoryStorage, SqlStorage, create_storage


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "memory"
    assert settings.session_ttl_seconds == 86400
    assert settings.is_development


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("SESSION_TTL_SECONDS", "60")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "sql"
    assert settings.session_ttl_seconds == 60
    assert not settings.is_development


def test_create_storage():
    assert isinstance(create_storage(Settings(_env_file=None, storage_backend="memory")), MemoryStorage)
    sql = create_storage(Settings(_env_file=None, storage_backend="SQL", database_url="sqlite+aiosqlite:///x.db"))
    assert isinstance(sql, SqlStorage)

    with pytest.raises(ValueError):
        create_storage(Settings(_env_file=None, storage_backend="mongo"))


def test_app_is_built_by_factory_only():
    import collab_editor.main as main

    assert not hasattr(main, "app")
    assert callable(main.create_app)
