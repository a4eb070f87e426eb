"""Article endpoints — public reads, author writes and likes."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from quillpress.application.schemas import (
    ArticleCreate,
    ArticleCreatedResponse,
    ArticleEditResponse,
    ArticleResponse,
    ArticleUpdate,
    LikeToggleResponse,
    SuccessResponse,
    TrendingArticleResponse,
)
from quillpress.application.services import ArticleService
from quillpress.domain.entities import ArticleSearch, Identity, SortMode
from quillpress.domain.exceptions import EntityNotFoundError, PermissionDeniedError
from quillpress.infrastructure.dependencies import get_article_service, get_current_identity
from quillpress.presentation.api.mappers import (
    to_article_response,
    to_edit_response,
    to_trending_response,
)

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    query: str | None = Query(None, description="Substring of title, content or excerpt"),
    tags: list[str] | None = Query(None, description="Every listed tag must be present"),
    author: str | None = Query(None, description="Exact author username"),
    sort_by: SortMode = Query(SortMode.LATEST, alias="sortBy"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Search published articles (at most 50)."""
    criteria = ArticleSearch(query=query, tags=tags or [], author=author, sort_by=sort_by)
    views = await service.list_articles(criteria)
    return [to_article_response(v) for v in views]


@router.get("/trending", response_model=list[TrendingArticleResponse])
async def trending_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[TrendingArticleResponse]:
    """Top 10 articles of the last 7 days by trending score."""
    views = await service.trending_articles()
    return [to_trending_response(v) for v in views]


@router.get("/{slug}", response_model=ArticleResponse)
async def get_article(
    slug: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a published article by slug. Each call counts as one view."""
    try:
        view = await service.get_published_article(slug)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return to_article_response(view)


@router.post("", response_model=ArticleCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    identity: Identity = Depends(get_current_identity),
    service: ArticleService = Depends(get_article_service),
) -> ArticleCreatedResponse:
    """Submit a new article for moderation."""
    article = await service.create_article(identity.id, data)
    return ArticleCreatedResponse(id=article.id, slug=article.slug)


@router.put("/{article_id}", response_model=SuccessResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    identity: Identity = Depends(get_current_identity),
    service: ArticleService = Depends(get_article_service),
) -> SuccessResponse:
    """Update one of the caller's own articles."""
    try:
        await service.update_article(identity.id, article_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
    return SuccessResponse()


@router.get("/{article_id}/edit", response_model=ArticleEditResponse)
async def get_article_for_edit(
    article_id: int,
    identity: Identity = Depends(get_current_identity),
    service: ArticleService = Depends(get_article_service),
) -> ArticleEditResponse:
    """Retrieve one of the caller's own articles, whatever its status."""
    try:
        view = await service.get_article_for_edit(identity.id, article_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return to_edit_response(view)


@router.post("/{article_id}/like", response_model=LikeToggleResponse)
async def toggle_like(
    article_id: int,
    identity: Identity = Depends(get_current_identity),
    service: ArticleService = Depends(get_article_service),
) -> LikeToggleResponse:
    """Like the article, or take the like back if already given."""
    try:
        liked = await service.toggle_like(identity.id, article_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return LikeToggleResponse(liked=liked)
