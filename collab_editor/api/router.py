from fastapi import APIRouter

from collab_editor.api.http import documents_router, health_router, sessions_router

api_router = APIRouter(prefix="/api")
api_router.include_router(health_router)
api_router.include_router(documents_router)
api_router.include_router(sessions_router)
