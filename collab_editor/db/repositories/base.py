from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from collab_editor.domains.documents.entities import Document
from collab_editor.domains.sessions.entities import UserSession


class DocumentRepository(ABC):
    """Интерфейс хранилища документов"""

    @abstractmethod
    async def create(self, document: Document) -> Document:
        ...

    @abstractmethod
    async def get_by_id(self, document_id: str) -> Optional[Document]:
        ...

    @abstractmethod
    async def get_for_user(self, username: str) -> List[Document]:
        """Документы, где пользователь владелец или соавтор, новые изменения первыми"""

    @abstractmethod
    async def update(self, document: Document) -> Optional[Document]:
        """Сохранение документа целиком, None если документа уже нет"""

    @abstractmethod
    async def delete(self, document_id: str) -> bool:
        ...


class SessionRepository(ABC):
    """Интерфейс хранилища сессий"""

    @abstractmethod
    async def create(self, session: UserSession) -> UserSession:
        ...

    @abstractmethod
    async def get_by_session_id(self, session_id: str) -> Optional[UserSession]:
        ...

    @abstractmethod
    async def get_active_by_username(self, username: str) -> Optional[UserSession]:
        ...

    @abstractmethod
    async def update(self, session: UserSession) -> Optional[UserSession]:
        ...

    @abstractmethod
    async def deactivate_expired(self, cutoff: datetime, now: datetime) -> int:
        """Деактивация сессий с last_activity раньше cutoff, возвращает их количество"""
