import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from collab_editor.core.clock import utcnow


@dataclass
class Document:
    """Сущность документа"""
    id: str
    title: str
    owner: str
    content: str = ""
    collaborators: List[str] = field(default_factory=list)
    is_public: bool = False
    last_modified_by: str = ""
    last_modified: datetime = field(default_factory=utcnow)
    version: int = 1
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def create_document(
        cls,
        title: str,
        owner: str,
        content: str = "",
        collaborators: Optional[List[str]] = None,
        is_public: bool = False,
        now: Optional[datetime] = None
    ) -> "Document":
        """Создание нового документа, автор становится владельцем"""
        now = now or utcnow()
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            owner=owner,
            content=content,
            collaborators=list(collaborators or []),
            is_public=is_public,
            last_modified_by=owner,
            last_modified=now,
            version=1,
            created_at=now,
            updated_at=now
        )

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, owner={self.owner}, version={self.version})"


@dataclass
class DocumentPatch:
    """Изменение документа: None означает, что поле не передано"""
    title: Optional[str] = None
    content: Optional[str] = None

    def is_empty(self) -> bool:
        return self.title is None and self.content is None
