from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from collab_editor.api.deps import get_session_service
from collab_editor.api.schemas import ApiResponse
from collab_editor.domains.sessions.schemas import SessionActivity, SessionCreate, SessionResponse
from collab_editor.domains.sessions.services import SessionService

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post(
    "",
    response_model=ApiResponse[SessionResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED
)
async def create_session(
    session_data: SessionCreate,
    response: Response,
    service: SessionService = Depends(get_session_service)
):
    """Вход по имени пользователя"""
    session, created = await service.start_session(session_data.username)

    if not created:
        response.status_code = status.HTTP_200_OK

    return ApiResponse[SessionResponse](
        message="Session created successfully" if created else "Session resumed",
        data=SessionResponse.model_validate(session)
    )


@router.get("/{session_id}", response_model=ApiResponse[SessionResponse], response_model_exclude_none=True)
async def get_session(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    """Получение информации о сессии"""
    session = await service.get_session(session_id)

    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found or expired"
        )

    return ApiResponse[SessionResponse](
        message="Session retrieved successfully",
        data=SessionResponse.model_validate(session)
    )


@router.put(
    "/{session_id}/activity",
    response_model=ApiResponse[SessionResponse],
    response_model_exclude_none=True
)
async def update_session_activity(
    session_id: str,
    activity: Optional[SessionActivity] = Body(None),
    service: SessionService = Depends(get_session_service)
):
    """Обновление активности сессии"""
    current_document = activity.current_document if activity else None
    session = await service.record_activity(session_id, current_document=current_document)

    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found or expired"
        )

    return ApiResponse[SessionResponse](
        message="Session activity updated",
        data=SessionResponse.model_validate(session)
    )


@router.delete("/{session_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def end_session(
    session_id: str,
    service: SessionService = Depends(get_session_service)
):
    """Завершение сессии"""
    ended = await service.end_session(session_id)

    if not ended:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found"
        )

    return ApiResponse(message="Session ended successfully")
