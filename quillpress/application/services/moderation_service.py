"""Application service for the administrator moderation workflow."""

import logging

from quillpress.application.interfaces import ArticleRepository, UserProfileRepository
from quillpress.domain.entities import Article, ArticleStatus, ArticleView
from quillpress.domain.exceptions import EntityNotFoundError, PermissionDeniedError

from .article_service import Clock, utc_now
from .read_model import ArticleReadModelComposer

logger = logging.getLogger(__name__)

QUEUE_STATUSES = [ArticleStatus.PENDING, ArticleStatus.PUBLISHED, ArticleStatus.HIDDEN]


class ModerationService:
    """Admin-only operations: browse the queue and set article status.

    Status changes are not checked against a transition graph; any status
    may be written over any other.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        profile_repository: UserProfileRepository,
        composer: ArticleReadModelComposer,
        clock: Clock = utc_now,
    ):
        self._repository = repository
        self._profiles = profile_repository
        self._composer = composer
        self._clock = clock

    async def list_queue(self, user_id: str, status: ArticleStatus | None = None) -> list[ArticleView]:
        await self._require_admin(user_id)
        statuses = [status] if status is not None else QUEUE_STATUSES
        articles = await self._repository.list_by_status(statuses)
        return await self._composer.compose(articles)

    async def set_status(
        self,
        user_id: str,
        article_id: int,
        status: ArticleStatus,
        admin_notes: str | None = None,
    ) -> Article:
        await self._require_admin(user_id)
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)

        previous = article.status
        article.set_status(status, admin_notes or None, now=self._clock())
        article = await self._repository.update(article)
        logger.info(
            "Article %s moved %s -> %s by %s",
            article_id,
            previous.value,
            status.value,
            user_id,
        )
        return article

    async def _require_admin(self, user_id: str) -> None:
        if not await self._profiles.is_admin(user_id):
            raise PermissionDeniedError("Admin access required")
