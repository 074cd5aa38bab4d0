"""Общие фикстуры тестов.

Запуск:  pytest -v
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from collab_editor.core.config import Settings
from collab_editor.db.repositories.memory import MemoryDocumentRepository, MemorySessionRepository
from collab_editor.domains.documents.entities import Document
from collab_editor.main import create_app


class FakeClock:
    """Управляемые часы для сервисов"""

    def __init__(self, start: datetime = None):
        self.now = start or datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def document_repository():
    return MemoryDocumentRepository()


@pytest.fixture
def session_repository():
    return MemorySessionRepository()


@pytest.fixture
def make_document(clock):
    def _make(**overrides) -> Document:
        fields = {
            "title": "Notes",
            "owner": "alice",
            "content": "A",
            "collaborators": ["bob"],
            "now": clock(),
        }
        fields.update(overrides)
        return Document.create_document(**fields)
    return _make


@pytest.fixture(params=["memory", "sql"])
def settings(request, tmp_path):
    """HTTP-тесты гоняются на обоих хранилищах"""
    return Settings(
        _env_file=None,
        environment="test",
        storage_backend=request.param,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        session_reap_interval_seconds=3600,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
