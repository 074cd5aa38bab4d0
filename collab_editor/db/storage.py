import logging
from abc import ABC, abstractmethod

from collab_editor.core.config import Settings
from collab_editor.core.db import Database
from collab_editor.db.repositories import (
    DocumentRepository, MemoryDocumentRepository, MemorySessionRepository,
    SessionRepository, SqlDocumentRepository, SqlSessionRepository
)

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Хранилище приложения: открывается при старте и закрывается при остановке"""

    documents: DocumentRepository
    sessions: SessionRepository

    @abstractmethod
    async def open(self) -> None:
        ...

    @abstractmethod
    async def close(self) -> None:
        ...


class MemoryStorage(Storage):
    """Хранилище в памяти процесса, данные теряются при перезапуске"""

    def __init__(self):
        self.documents = MemoryDocumentRepository()
        self.sessions = MemorySessionRepository()

    async def open(self) -> None:
        logger.info("Using in-memory storage")

    async def close(self) -> None:
        self.documents.clear()
        self.sessions.clear()


class SqlStorage(Storage):
    """Хранилище на SQLAlchemy (PostgreSQL через asyncpg или SQLite через aiosqlite)"""

    def __init__(self, database: Database, create_schema: bool = False):
        self.database = database
        self.create_schema = create_schema
        self.documents = SqlDocumentRepository(database)
        self.sessions = SqlSessionRepository(database)

    async def open(self) -> None:
        await self.database.connect(create_schema=self.create_schema)

    async def close(self) -> None:
        await self.database.disconnect()


def create_storage(settings: Settings) -> Storage:
    """Выбор хранилища по настройкам"""
    backend = settings.storage_backend.lower()

    if backend == "memory":
        return MemoryStorage()
    if backend == "sql":
        database = Database(settings.database_url, echo=settings.database_echo)
        return SqlStorage(database, create_schema=settings.database_create_schema)

    raise ValueError(f"Unsupported storage backend: {settings.storage_backend}")
