"""Document endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from config.storage import get_storage
from repositories.storage import MemStorage
from schemas.common import ErrorResponse
from schemas.document import Document, DocumentCreate

router = APIRouter()

DOCUMENT_NOT_FOUND = "Document not found"


@router.get(
    "/documents/{document_id}",
    response_model=Document,
    responses={404: {"model": ErrorResponse}},
)
async def get_document(
    document_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Document:
    document = await storage.get_document(document_id)
    if document is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=DOCUMENT_NOT_FOUND)
    return document


@router.post(
    "/documents",
    response_model=Document,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_document(
    payload: DocumentCreate,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Document:
    """Register an uploaded document for an employee.

    Only the metadata is stored; the file itself lives at ``path``.
    """
    return await storage.create_document(payload)


@router.delete(
    "/documents/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def delete_document(
    document_id: int,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> Response:
    if not await storage.delete_document(document_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=DOCUMENT_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
