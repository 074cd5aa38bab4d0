from collab_editor.db.repositories.base import DocumentRepository, SessionRepository
from collab_editor.db.repositories.memory import MemoryDocumentRepository, MemorySessionRepository
from collab_editor.db.repositories.document_repository import SqlDocumentRepository
from collab_editor.db.repositories.session_repository import SqlSessionRepository

__all__ = [
    "DocumentRepository",
    "SessionRepository",
    "MemoryDocumentRepository",
    "MemorySessionRepository",
    "SqlDocumentRepository",
    "SqlSessionRepository"
]
