import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from collab_editor import __version__
from collab_editor.api.errors import register_exception_handlers
from collab_editor.api.router import api_router
from collab_editor.core.config import Settings, settings as default_settings
from collab_editor.core.logging import configure_logging
from collab_editor.db.storage import Storage, create_storage
from collab_editor.domains.sessions.reaper import SessionReaper
from collab_editor.domains.sessions.services import SessionService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """Сборка приложения: настройки, хранилище, роутеры, обработчики ошибок"""
    settings = settings or default_settings
    configure_logging(settings.log_level)
    storage = storage or create_storage(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await storage.open()
        reaper = SessionReaper(
            SessionService(storage.sessions, ttl=timedelta(seconds=settings.session_ttl_seconds)),
            interval_seconds=settings.session_reap_interval_seconds
        )
        reaper.start()
        app.state.session_reaper = reaper
        logger.info(f"{settings.app_name} started ({settings.environment})")
        try:
            yield
        finally:
            await reaper.stop()
            await storage.close()
            logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        description="REST API for a basic collaborative document editor",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.storage = storage

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)
    app.include_router(api_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": f"{settings.app_name} API",
            "version": __version__,
            "docs": "/docs",
            "health": "/api/health"
        }

    return app


if __name__ == "__main__":
    import uvicorn

    # то же, что: uvicorn collab_editor.main:create_app --factory
    uvicorn.run("collab_editor.main:create_app", factory=True, host="0.0.0.0", port=8000)
