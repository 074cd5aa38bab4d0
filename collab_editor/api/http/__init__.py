from collab_editor.api.http.health import router as health_router
from collab_editor.api.http.documents import router as documents_router
from collab_editor.api.http.sessions import router as sessions_router

__all__ = [
    "health_router",
    "documents_router",
    "sessions_router"
]
