import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable, List, Optional

from collab_editor.core.clock import utcnow
from collab_editor.core.errors import AccessDeniedError
from collab_editor.domains.documents import policy
from collab_editor.domains.documents.entities import Document
from collab_editor.domains.documents.schemas import (
    DocumentCreate, DocumentSharingUpdate, DocumentUpdate
)

if TYPE_CHECKING:
    from collab_editor.db.repositories.base import DocumentRepository

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами.

    Хранилище отвечает только за чтение и запись, решения о доступе
    принимает модуль policy. Документ не найден: методы возвращают None
    (или False). Доступ запрещён: AccessDeniedError.
    """

    def __init__(self, repository: "DocumentRepository", clock: Callable[[], datetime] = utcnow):
        self.repository = repository
        self.clock = clock

    async def create_document(self, document_data: DocumentCreate) -> Document:
        """Создание нового документа"""
        document = Document.create_document(
            title=document_data.title,
            owner=document_data.username,
            content=document_data.content,
            collaborators=document_data.collaborators,
            is_public=document_data.is_public,
            now=self.clock()
        )

        created = await self.repository.create(document)
        logger.info(f"Document {created.id} created by {created.owner}")
        return created

    async def list_documents(self, username: str) -> List[Document]:
        """Документы, доступные пользователю как владельцу или соавтору"""
        return await self.repository.get_for_user(username)

    async def get_document(self, document_id: str, username: str) -> Optional[Document]:
        """Получение документа с проверкой прав на чтение"""
        document = await self.repository.get_by_id(document_id)

        if not document:
            return None

        if not policy.can_read(document, username):
            logger.warning(f"Read access to document {document_id} denied for {username}")
            raise AccessDeniedError("Access denied")

        return document

    async def update_document(self, document_id: str, update_data: DocumentUpdate) -> Optional[Document]:
        """Обновление заголовка и/или содержимого документа"""
        document = await self.repository.get_by_id(document_id)

        if not document:
            return None

        username = update_data.username
        if not policy.can_write(document, username):
            logger.warning(f"Write access to document {document_id} denied for {username}")
            raise AccessDeniedError("Access denied")

        updated = policy.apply_mutation(document, update_data.to_patch(), username, now=self.clock())

        # Последняя запись побеждает: версия при сохранении не сверяется
        saved = await self.repository.update(updated)
        if saved and saved.version != document.version:
            logger.debug(f"Document {document_id} moved to version {saved.version} by {username}")
        return saved

    async def update_sharing(self, document_id: str, sharing: DocumentSharingUpdate) -> Optional[Document]:
        """Изменение списка соавторов и публичности, доступно только владельцу"""
        document = await self.repository.get_by_id(document_id)

        if not document:
            return None

        if not policy.is_owner(document, sharing.username):
            logger.warning(f"Sharing change on document {document_id} denied for {sharing.username}")
            raise AccessDeniedError("Only the owner can change sharing settings")

        if sharing.collaborators is not None:
            document.collaborators = list(sharing.collaborators)
        if sharing.is_public is not None:
            document.is_public = sharing.is_public
        document.updated_at = self.clock()

        return await self.repository.update(document)

    async def delete_document(self, document_id: str, username: str) -> bool:
        """Удаление документа"""
        document = await self.repository.get_by_id(document_id)

        if not document:
            return False

        # Только владелец может удалить документ
        if not policy.can_delete(document, username):
            logger.warning(f"Delete of document {document_id} denied for {username}")
            raise AccessDeniedError("Only the owner can delete this document")

        deleted = await self.repository.delete(document_id)
        if deleted:
            logger.info(f"Document {document_id} deleted by {username}")
        return deleted
