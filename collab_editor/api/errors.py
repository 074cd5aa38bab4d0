import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from collab_editor.core.config import Settings

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    body = {"success": False, "message": message}
    body.update({key: value for key, value in extra.items() if value is not None})
    return JSONResponse(status_code=status_code, content=body)


def _validation_errors(exc: RequestValidationError) -> list:
    """Ошибки pydantic в виде [{field, message}]"""
    errors = []
    for error in exc.errors():
        # первый элемент loc: body / query / path
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({
            "field": ".".join(location),
            "message": error.get("msg", "Invalid value")
        })
    return errors


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Все ошибки отдаются в формате {success, message, errors?}"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Validation error",
            errors=_validation_errors(exc)
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            error=str(exc) if settings.is_development else None
        )
