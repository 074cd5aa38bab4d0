from typing import List, Optional

from sqlalchemy import or_, select

from collab_editor.core.clock import ensure_aware
from collab_editor.core.db import Database
from collab_editor.db.models.document import DocumentCollaboratorModel, DocumentModel
from collab_editor.db.repositories.base import DocumentRepository
from collab_editor.domains.documents.entities import Document


class SqlDocumentRepository(DocumentRepository):
    """Репозиторий для работы с документами"""

    def __init__(self, database: Database):
        self.database = database

    async def create(self, document: Document) -> Document:
        """Создание нового документа"""
        db_document = DocumentModel(id=document.id, owner=document.owner)
        self._apply(db_document, document)
        # у новой модели коллекция не загружена, присваиваем всегда
        db_document.collaborators = self._collaborator_models(document)

        async with self.database.session_factory() as session:
            session.add(db_document)
            await session.commit()
            return self._to_domain(db_document)

    async def get_by_id(self, document_id: str) -> Optional[Document]:
        """Получение документа по id"""
        async with self.database.session_factory() as session:
            db_document = await session.get(DocumentModel, document_id)
            return self._to_domain(db_document) if db_document else None

    async def get_for_user(self, username: str) -> List[Document]:
        """Получение документов владельца и соавтора"""
        async with self.database.session_factory() as session:
            result = await session.execute(
                select(DocumentModel)
                .where(
                    or_(
                        DocumentModel.owner == username,
                        DocumentModel.collaborators.any(DocumentCollaboratorModel.username == username)
                    )
                )
                .order_by(DocumentModel.last_modified.desc())
            )
            db_documents = result.scalars().all()
            return [self._to_domain(doc) for doc in db_documents]

    async def update(self, document: Document) -> Optional[Document]:
        """Обновление документа"""
        async with self.database.session_factory() as session:
            db_document = await session.get(DocumentModel, document.id)
            if db_document is None:
                return None

            self._apply(db_document, document)
            current = [c.username for c in db_document.collaborators]
            if current != document.collaborators:
                db_document.collaborators = self._collaborator_models(document)

            await session.commit()
            return self._to_domain(db_document)

    async def delete(self, document_id: str) -> bool:
        """Удаление документа"""
        async with self.database.session_factory() as session:
            db_document = await session.get(DocumentModel, document_id)
            if db_document is None:
                return False

            await session.delete(db_document)
            await session.commit()
            return True

    def _apply(self, db_document: DocumentModel, document: Document) -> None:
        """Перенос скалярных полей доменной сущности в модель (владелец не меняется)"""
        db_document.title = document.title
        db_document.content = document.content
        db_document.is_public = document.is_public
        db_document.last_modified_by = document.last_modified_by
        db_document.last_modified = document.last_modified
        db_document.version = document.version
        db_document.created_at = document.created_at
        db_document.updated_at = document.updated_at

    @staticmethod
    def _collaborator_models(document: Document) -> List[DocumentCollaboratorModel]:
        return [
            DocumentCollaboratorModel(username=username)
            for username in document.collaborators
        ]

    def _to_domain(self, db_document: DocumentModel) -> Document:
        """Преобразование модели БД в доменную сущность"""
        return Document(
            id=db_document.id,
            title=db_document.title,
            owner=db_document.owner,
            content=db_document.content,
            collaborators=[c.username for c in db_document.collaborators],
            is_public=db_document.is_public,
            last_modified_by=db_document.last_modified_by,
            last_modified=ensure_aware(db_document.last_modified),
            version=db_document.version,
            created_at=ensure_aware(db_document.created_at),
            updated_at=ensure_aware(db_document.updated_at)
        )
