from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from collab_editor.db.base import Base


class DocumentModel(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False, default="")
    owner = Column(String(50), nullable=False, index=True)
    is_public = Column(Boolean, nullable=False, default=False)
    last_modified_by = Column(String(50), nullable=False)
    last_modified = Column(DateTime(timezone=True), nullable=False, index=True)
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    collaborators = relationship(
        "DocumentCollaboratorModel",
        back_populates="document",
        cascade="all, delete-orphan",
        order_by="DocumentCollaboratorModel.id",
        lazy="selectin"
    )


class DocumentCollaboratorModel(Base):
    __tablename__ = "document_collaborators"

    # Дубликаты допустимы, поэтому суррогатный ключ
    id = Column(Integer, primary_key=True, autoincrement=True)
    document_id = Column(String(36), ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True)
    username = Column(String(50), nullable=False, index=True)

    # Relationships
    document = relationship("DocumentModel", back_populates="collaborators")
