import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from collab_editor.core.clock import utcnow


@dataclass
class UserSession:
    """Сессия пользователя: только идентификация по имени, без прав на документы"""
    session_id: str
    username: str
    is_active: bool = True
    last_activity: datetime = field(default_factory=utcnow)
    current_document: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def start(cls, username: str, now: Optional[datetime] = None) -> "UserSession":
        """Создание новой активной сессии"""
        now = now or utcnow()
        return cls(
            session_id=str(uuid.uuid4()),
            username=username,
            is_active=True,
            last_activity=now,
            created_at=now,
            updated_at=now
        )

    def is_expired(self, ttl: timedelta, now: Optional[datetime] = None) -> bool:
        """Сессия истекла, если с последней активности прошло больше ttl"""
        now = now or utcnow()
        return now - self.last_activity > ttl

    def touch(self, now: Optional[datetime] = None, current_document: Optional[str] = None) -> None:
        """Обновление времени последней активности"""
        now = now or utcnow()
        self.last_activity = now
        self.updated_at = now
        if current_document is not None:
            self.current_document = current_document

    def end(self, now: Optional[datetime] = None) -> None:
        """Завершение сессии"""
        self.is_active = False
        self.updated_at = now or utcnow()

    def __repr__(self) -> str:
        return f"UserSession(session_id={self.session_id}, username={self.username}, active={self.is_active})"
