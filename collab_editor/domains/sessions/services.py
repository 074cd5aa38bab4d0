import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from collab_editor.core.clock import utcnow
from collab_editor.domains.sessions.entities import UserSession

if TYPE_CHECKING:
    from collab_editor.db.repositories.base import SessionRepository

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(hours=24)


class SessionService:
    """Сервис для управления сессиями пользователей"""

    def __init__(
        self,
        repository: "SessionRepository",
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Callable[[], datetime] = utcnow
    ):
        self.repository = repository
        self.ttl = ttl
        self.clock = clock

    async def start_session(self, username: str) -> Tuple[UserSession, bool]:
        """Вход по имени: возобновляет активную сессию или создаёт новую.

        Возвращает пару (сессия, создана ли новая).
        """
        now = self.clock()
        existing = await self.repository.get_active_by_username(username)

        if existing and not await self._expire_if_stale(existing, now):
            existing.touch(now)
            resumed = await self.repository.update(existing)
            if resumed:
                logger.info(f"Session {resumed.session_id} resumed for {username}")
                return resumed, False

        session = await self.repository.create(UserSession.start(username, now=now))
        logger.info(f"Session {session.session_id} created for {username}")
        return session, True

    async def get_session(self, session_id: str) -> Optional[UserSession]:
        """Получение активной сессии, просроченная считается отсутствующей"""
        session = await self.repository.get_by_session_id(session_id)

        if not session or not session.is_active:
            return None

        if await self._expire_if_stale(session, self.clock()):
            return None

        return session

    async def record_activity(self, session_id: str, current_document: Optional[str] = None) -> Optional[UserSession]:
        """Обновление времени активности и текущего документа"""
        session = await self.get_session(session_id)

        if not session:
            return None

        session.touch(self.clock(), current_document=current_document)
        return await self.repository.update(session)

    async def end_session(self, session_id: str) -> bool:
        """Завершение сессии, повторное завершение тоже успешно"""
        session = await self.repository.get_by_session_id(session_id)

        if not session:
            return False

        if session.is_active:
            session.end(self.clock())
            await self.repository.update(session)
            logger.info(f"Session {session_id} ended for {session.username}")

        return True

    async def reap_expired(self) -> int:
        """Деактивация всех сессий без активности дольше ttl"""
        now = self.clock()
        count = await self.repository.deactivate_expired(now - self.ttl, now)
        if count:
            logger.info(f"Expired {count} inactive session(s)")
        return count

    async def _expire_if_stale(self, session: UserSession, now: datetime) -> bool:
        if not session.is_expired(self.ttl, now):
            return False

        session.end(now)
        await self.repository.update(session)
        logger.info(f"Session {session.session_id} expired for {session.username}")
        return True
