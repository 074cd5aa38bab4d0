from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from collab_editor.api.deps import get_document_service, require_username
from collab_editor.api.schemas import ApiResponse
from collab_editor.core.errors import AccessDeniedError
from collab_editor.domains.documents.schemas import (
    DocumentCreate, DocumentResponse, DocumentSharingUpdate,
    DocumentSummary, DocumentUpdate
)
from collab_editor.domains.documents.services import DocumentService

router = APIRouter(prefix="/docs", tags=["documents"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Document not found"
    )


def _forbidden(e: AccessDeniedError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=str(e)
    )


@router.post(
    "",
    response_model=ApiResponse[DocumentResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED
)
async def create_document(
    document_data: DocumentCreate,
    service: DocumentService = Depends(get_document_service)
):
    """Создание нового документа"""
    document = await service.create_document(document_data)

    return ApiResponse[DocumentResponse](
        message="Document created successfully",
        data=DocumentResponse.model_validate(document)
    )


@router.get("", response_model=ApiResponse[List[DocumentSummary]], response_model_exclude_none=True)
async def get_documents(
    username: str = Depends(require_username),
    service: DocumentService = Depends(get_document_service)
):
    """Получение списка документов пользователя"""
    documents = await service.list_documents(username)

    return ApiResponse[List[DocumentSummary]](
        message="Documents retrieved successfully",
        data=[DocumentSummary.model_validate(doc) for doc in documents]
    )


@router.get("/{document_id}", response_model=ApiResponse[DocumentResponse], response_model_exclude_none=True)
async def get_document(
    document_id: str,
    username: str = Depends(require_username),
    service: DocumentService = Depends(get_document_service)
):
    """Получение документа по id"""
    try:
        document = await service.get_document(document_id, username)
    except AccessDeniedError as e:
        raise _forbidden(e)

    if not document:
        raise _not_found()

    return ApiResponse[DocumentResponse](
        message="Document retrieved successfully",
        data=DocumentResponse.model_validate(document)
    )


@router.put("/{document_id}", response_model=ApiResponse[DocumentResponse], response_model_exclude_none=True)
async def update_document(
    document_id: str,
    update_data: DocumentUpdate,
    service: DocumentService = Depends(get_document_service)
):
    """Обновление документа"""
    try:
        document = await service.update_document(document_id, update_data)
    except AccessDeniedError as e:
        raise _forbidden(e)

    if not document:
        raise _not_found()

    return ApiResponse[DocumentResponse](
        message="Document updated successfully",
        data=DocumentResponse.model_validate(document)
    )


@router.put(
    "/{document_id}/sharing",
    response_model=ApiResponse[DocumentResponse],
    response_model_exclude_none=True
)
async def update_document_sharing(
    document_id: str,
    sharing: DocumentSharingUpdate,
    service: DocumentService = Depends(get_document_service)
):
    """Изменение соавторов и публичности документа"""
    try:
        document = await service.update_sharing(document_id, sharing)
    except AccessDeniedError as e:
        raise _forbidden(e)

    if not document:
        raise _not_found()

    return ApiResponse[DocumentResponse](
        message="Document sharing updated successfully",
        data=DocumentResponse.model_validate(document)
    )


@router.delete("/{document_id}", response_model=ApiResponse, response_model_exclude_none=True)
async def delete_document(
    document_id: str,
    username: str = Depends(require_username),
    service: DocumentService = Depends(get_document_service)
):
    """Удаление документа"""
    try:
        deleted = await service.delete_document(document_id, username)
    except AccessDeniedError as e:
        raise _forbidden(e)

    if not deleted:
        raise _not_found()

    return ApiResponse(message="Document deleted successfully")
