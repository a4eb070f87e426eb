"""Moderation endpoints — administrators only."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from quillpress.application.schemas import AdminArticleResponse, ArticleStatusUpdate, SuccessResponse
from quillpress.application.services import ModerationService
from quillpress.domain.entities import ArticleStatus, Identity
from quillpress.domain.exceptions import EntityNotFoundError, PermissionDeniedError
from quillpress.infrastructure.dependencies import get_current_identity, get_moderation_service
from quillpress.presentation.api.mappers import to_admin_response

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/articles", response_model=list[AdminArticleResponse])
async def list_moderation_queue(
    status_filter: ArticleStatus | None = Query(None, alias="status"),
    identity: Identity = Depends(get_current_identity),
    service: ModerationService = Depends(get_moderation_service),
) -> list[AdminArticleResponse]:
    """Pending, published and hidden articles, newest first."""
    try:
        views = await service.list_queue(identity.id, status=status_filter)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
    return [to_admin_response(v) for v in views]


@router.put("/articles/{article_id}/status", response_model=SuccessResponse)
async def set_article_status(
    article_id: int,
    data: ArticleStatusUpdate,
    identity: Identity = Depends(get_current_identity),
    service: ModerationService = Depends(get_moderation_service),
) -> SuccessResponse:
    """Set an article's status and admin notes."""
    try:
        await service.set_status(identity.id, article_id, data.status, data.admin_notes)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessResponse()
