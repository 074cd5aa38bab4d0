from copy import deepcopy
from datetime import datetime
from typing import Dict, List, Optional

from collab_editor.db.repositories.base import DocumentRepository, SessionRepository
from collab_editor.domains.documents.entities import Document
from collab_editor.domains.sessions.entities import UserSession


class MemoryDocumentRepository(DocumentRepository):
    """Документы в словаре по id. Наружу отдаются только копии"""

    def __init__(self):
        self._documents: Dict[str, Document] = {}

    async def create(self, document: Document) -> Document:
        if document.id in self._documents:
            raise ValueError(f"Document {document.id} already exists")
        self._documents[document.id] = deepcopy(document)
        return deepcopy(document)

    async def get_by_id(self, document_id: str) -> Optional[Document]:
        document = self._documents.get(document_id)
        return deepcopy(document) if document else None

    async def get_for_user(self, username: str) -> List[Document]:
        documents = [
            doc for doc in self._documents.values()
            if doc.owner == username or username in doc.collaborators
        ]
        documents.sort(key=lambda doc: doc.last_modified, reverse=True)
        return [deepcopy(doc) for doc in documents]

    async def update(self, document: Document) -> Optional[Document]:
        if document.id not in self._documents:
            return None
        self._documents[document.id] = deepcopy(document)
        return deepcopy(document)

    async def delete(self, document_id: str) -> bool:
        return self._documents.pop(document_id, None) is not None

    def clear(self) -> None:
        self._documents.clear()


class MemorySessionRepository(SessionRepository):
    """Сессии в словаре по session_id"""

    def __init__(self):
        self._sessions: Dict[str, UserSession] = {}

    async def create(self, session: UserSession) -> UserSession:
        if session.session_id in self._sessions:
            raise ValueError(f"Session {session.session_id} already exists")
        self._sessions[session.session_id] = deepcopy(session)
        return deepcopy(session)

    async def get_by_session_id(self, session_id: str) -> Optional[UserSession]:
        session = self._sessions.get(session_id)
        return deepcopy(session) if session else None

    async def get_active_by_username(self, username: str) -> Optional[UserSession]:
        active = [
            s for s in self._sessions.values()
            if s.username == username and s.is_active
        ]
        if not active:
            return None
        return deepcopy(max(active, key=lambda s: s.last_activity))

    async def update(self, session: UserSession) -> Optional[UserSession]:
        if session.session_id not in self._sessions:
            return None
        self._sessions[session.session_id] = deepcopy(session)
        return deepcopy(session)

    async def deactivate_expired(self, cutoff: datetime, now: datetime) -> int:
        count = 0
        for session in self._sessions.values():
            if session.is_active and session.last_activity < cutoff:
                session.end(now)
                count += 1
        return count

    def clear(self) -> None:
        self._sessions.clear()
