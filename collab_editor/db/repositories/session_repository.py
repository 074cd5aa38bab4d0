from datetime import datetime
from typing import Optional

from sqlalchemy import and_, select, update

from collab_editor.core.clock import ensure_aware
from collab_editor.core.db import Database
from collab_editor.db.models.session import UserSessionModel
from collab_editor.db.repositories.base import SessionRepository
from collab_editor.domains.sessions.entities import UserSession


class SqlSessionRepository(SessionRepository):
    """Репозиторий для работы с сессиями пользователей"""

    def __init__(self, database: Database):
        self.database = database

    async def create(self, user_session: UserSession) -> UserSession:
        """Создание новой сессии"""
        db_session = UserSessionModel(
            session_id=user_session.session_id,
            username=user_session.username,
            is_active=user_session.is_active,
            last_activity=user_session.last_activity,
            current_document=user_session.current_document,
            created_at=user_session.created_at,
            updated_at=user_session.updated_at
        )

        async with self.database.session_factory() as session:
            session.add(db_session)
            await session.commit()
            return self._to_domain(db_session)

    async def get_by_session_id(self, session_id: str) -> Optional[UserSession]:
        """Получение сессии по идентификатору"""
        async with self.database.session_factory() as session:
            db_session = await session.get(UserSessionModel, session_id)
            return self._to_domain(db_session) if db_session else None

    async def get_active_by_username(self, username: str) -> Optional[UserSession]:
        """Получение активной сессии пользователя"""
        async with self.database.session_factory() as session:
            result = await session.execute(
                select(UserSessionModel)
                .where(
                    and_(
                        UserSessionModel.username == username,
                        UserSessionModel.is_active == True  # noqa: E712
                    )
                )
                .order_by(UserSessionModel.last_activity.desc())
                .limit(1)
            )
            db_session = result.scalars().first()
            return self._to_domain(db_session) if db_session else None

    async def update(self, user_session: UserSession) -> Optional[UserSession]:
        """Обновление сессии"""
        async with self.database.session_factory() as session:
            db_session = await session.get(UserSessionModel, user_session.session_id)
            if db_session is None:
                return None

            db_session.is_active = user_session.is_active
            db_session.last_activity = user_session.last_activity
            db_session.current_document = user_session.current_document
            db_session.updated_at = user_session.updated_at
            await session.commit()
            return self._to_domain(db_session)

    async def deactivate_expired(self, cutoff: datetime, now: datetime) -> int:
        """Деактивация просроченных сессий"""
        stmt = (
            update(UserSessionModel)
            .where(UserSessionModel.last_activity < cutoff)
            .where(UserSessionModel.is_active == True)  # noqa: E712
            .values(is_active=False, updated_at=now)
        )

        async with self.database.session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
            return result.rowcount

    def _to_domain(self, db_session: UserSessionModel) -> UserSession:
        """Преобразование модели БД в доменную сущность"""
        return UserSession(
            session_id=db_session.session_id,
            username=db_session.username,
            is_active=db_session.is_active,
            last_activity=ensure_aware(db_session.last_activity),
            current_document=db_session.current_document,
            created_at=ensure_aware(db_session.created_at),
            updated_at=ensure_aware(db_session.updated_at)
        )
