from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from collab_editor.core.validators import Username


class SessionCreate(BaseModel):
    """Схема для входа по имени пользователя"""
    username: Username


class SessionActivity(BaseModel):
    """Необязательные данные пинга активности"""
    current_document: Optional[str] = Field(None, max_length=64)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionResponse(BaseModel):
    """Данные сессии"""
    session_id: str
    username: str
    last_activity: datetime
    current_document: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
