"""Application service (use case) for Article operations."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from quillpress.application.interfaces import (
    ArticleLikeRepository,
    ArticleRepository,
    ArticleTagRepository,
)
from quillpress.application.schemas import ArticleCreate, ArticleUpdate
from quillpress.domain.entities import Article, ArticleSearch, ArticleStatus, ArticleView
from quillpress.domain.entities.search import TRENDING_LIMIT, TRENDING_WINDOW, normalize_tags
from quillpress.domain.exceptions import ArticleLockedError, EntityNotFoundError
from quillpress.domain.slug import build_slug

from .read_model import ArticleReadModelComposer

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        tag_repository: ArticleTagRepository,
        like_repository: ArticleLikeRepository,
        composer: ArticleReadModelComposer,
        clock: Clock = utc_now,
    ):
        self._repository = repository
        self._tags = tag_repository
        self._likes = like_repository
        self._composer = composer
        self._clock = clock

    # ── Reads ────────────────────────────────────────────────────────

    async def list_articles(self, criteria: ArticleSearch) -> list[ArticleView]:
        articles = await self._repository.search(criteria)
        return await self._composer.compose(articles)

    async def trending_articles(self) -> list[ArticleView]:
        since = self._clock() - TRENDING_WINDOW
        ranked = await self._repository.trending(published_since=since, limit=TRENDING_LIMIT)
        return await self._composer.compose(
            [article for article, _ in ranked],
            scores=[score for _, score in ranked],
        )

    async def get_published_article(self, slug: str) -> ArticleView:
        """Fetch a published article by slug and record one view.

        Every successful fetch counts, repeat visits included.
        """
        article = await self._repository.get_published_by_slug(slug)
        if article is None:
            raise EntityNotFoundError("Article", slug)
        await self._repository.increment_views(article.id)
        article.views_count += 1
        return await self._composer.compose_one(article)

    async def get_article_for_edit(self, user_id: str, article_id: int) -> ArticleView:
        article = await self._get_owned(user_id, article_id)
        return await self._composer.compose_one(article)

    # ── Writes ───────────────────────────────────────────────────────

    async def create_article(self, user_id: str, data: ArticleCreate) -> Article:
        """Submit a new article. It always starts in the moderation queue."""
        now = self._clock()
        article = Article(
            title=data.title,
            slug=await self._unique_slug(data.title, now),
            content=data.content,
            excerpt=data.excerpt or None,
            cover_image_url=data.cover_image_url or None,
            author_id=user_id,
            status=ArticleStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        article = await self._repository.create(article)
        if data.tags:
            await self._tags.replace_all(article.id, normalize_tags(data.tags))
        logger.info("Article %s submitted by %s as '%s'", article.id, user_id, article.slug)
        return article

    async def update_article(self, user_id: str, article_id: int, data: ArticleUpdate) -> Article:
        article = await self._get_owned(user_id, article_id)
        if not article.is_editable:
            raise ArticleLockedError(article_id)

        fields = data.model_fields_set
        article.update(
            title=data.title,
            content=data.content,
            excerpt=(data.excerpt or None) if "excerpt" in fields else ...,
            cover_image_url=(data.cover_image_url or None) if "cover_image_url" in fields else ...,
        )
        article = await self._repository.update(article)
        if data.tags is not None:
            await self._tags.replace_all(article.id, normalize_tags(data.tags))
        return article

    async def toggle_like(self, user_id: str, article_id: int) -> bool:
        article = await self._repository.get_by_id(article_id)
        if article is None or article.status != ArticleStatus.PUBLISHED:
            raise EntityNotFoundError("Article", article_id)
        return await self._likes.toggle(article_id, user_id)

    # ── Helpers ──────────────────────────────────────────────────────

    async def _get_owned(self, user_id: str, article_id: int) -> Article:
        # Someone else's article is reported exactly like a missing one.
        article = await self._repository.get_owned(article_id, user_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def _unique_slug(self, title: str, now: datetime) -> str:
        timestamp_ms = int(now.timestamp() * 1000)
        slug = build_slug(title, timestamp_ms)
        while await self._repository.slug_exists(slug):
            timestamp_ms += 1
            slug = build_slug(title, timestamp_ms)
        return slug
