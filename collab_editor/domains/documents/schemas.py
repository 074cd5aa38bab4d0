from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from collab_editor.core.validators import (
    CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH, Username, strip_string
)
from collab_editor.domains.documents.entities import DocumentPatch


class CamelModel(BaseModel):
    """Базовая схема с camelCase-полями в JSON"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DocumentCreate(CamelModel):
    """Схема для создания документа"""
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(default="", max_length=CONTENT_MAX_LENGTH)
    username: Username
    collaborators: List[Username] = Field(default_factory=list)
    is_public: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return strip_string(v)


class DocumentUpdate(CamelModel):
    """Схема для обновления документа"""
    title: Optional[str] = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = Field(None, max_length=CONTENT_MAX_LENGTH)
    username: Username

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return strip_string(v)

    def to_patch(self) -> DocumentPatch:
        return DocumentPatch(title=self.title, content=self.content)


class DocumentSharingUpdate(CamelModel):
    """Схема для изменения списка соавторов и публичности"""
    username: Username
    collaborators: Optional[List[Username]] = None
    is_public: Optional[bool] = None


class DocumentSummary(CamelModel):
    """Краткая информация о документе для списка"""
    id: str
    title: str
    owner: str
    last_modified: datetime
    last_modified_by: str
    version: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DocumentResponse(DocumentSummary):
    """Полные данные документа"""
    content: str
    collaborators: List[str]
    is_public: bool
    updated_at: datetime
