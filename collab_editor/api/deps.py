from datetime import timedelta
from typing import Optional

from fastapi import Depends, HTTPException, Query, Request, status

from collab_editor.core.config import Settings
from collab_editor.db.storage import Storage
from collab_editor.domains.documents.services import DocumentService
from collab_editor.domains.sessions.services import SessionService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_document_service(storage: Storage = Depends(get_storage)) -> DocumentService:
    return DocumentService(storage.documents)


def get_session_service(
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings)
) -> SessionService:
    return SessionService(storage.sessions, ttl=timedelta(seconds=settings.session_ttl_seconds))


def require_username(username: Optional[str] = Query(None)) -> str:
    """Имя действующего пользователя из query-параметра username"""
    username = username.strip() if username else None
    if not username:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username is required"
        )
    return username
