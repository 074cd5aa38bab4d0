from fastapi import APIRouter, Request

from collab_editor import __version__
from collab_editor.api.schemas import ApiResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=ApiResponse[dict], response_model_exclude_none=True)
async def health(request: Request):
    """Проверка работоспособности"""
    settings = request.app.state.settings
    return ApiResponse[dict](
        message="OK",
        data={
            "version": __version__,
            "storage": settings.storage_backend,
            "environment": settings.environment
        }
    )
