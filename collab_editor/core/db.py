import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from collab_editor.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Асинхронный движок и фабрика сессий с явным жизненным циклом"""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    async def connect(self, create_schema: bool = False) -> None:
        """Создание движка, при необходимости и таблиц"""
        if self._engine is not None:
            return

        self._engine = create_async_engine(self.url, future=True, echo=self.echo)
        self._session_factory = async_sessionmaker(
            bind=self._engine, class_=AsyncSession, expire_on_commit=False
        )

        if create_schema:
            # импорт регистрирует модели в Base.metadata
            import collab_editor.db.models  # noqa: F401

            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database schema ensured")

        logger.info(f"Connected to database {self._engine.url.render_as_string(hide_password=True)}")

    async def disconnect(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connection closed")

    @property
    def session_factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        return self._session_factory
