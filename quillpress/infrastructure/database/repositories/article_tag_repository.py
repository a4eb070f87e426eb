"""Tag store backed by SQLAlchemy — one row per (article, tag)."""

from collections import defaultdict

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from quillpress.application.interfaces import ArticleTagRepository
from quillpress.domain.entities.search import normalize_tags
from quillpress.infrastructure.database.models import ArticleTagModel


class SQLAlchemyArticleTagRepository(ArticleTagRepository):
    """Implements the ArticleTagRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def replace_all(self, article_id: int, tags: list[str]) -> list[str]:
        normalized = normalize_tags(tags)
        await self._session.execute(
            delete(ArticleTagModel).where(ArticleTagModel.article_id == article_id)
        )
        self._session.add_all(
            [ArticleTagModel(article_id=article_id, tag_name=tag) for tag in normalized]
        )
        await self._session.flush()
        return normalized

    async def get_for_articles(self, article_ids: list[int]) -> dict[int, list[str]]:
        if not article_ids:
            return {}
        result = await self._session.execute(
            select(ArticleTagModel.article_id, ArticleTagModel.tag_name)
            .where(ArticleTagModel.article_id.in_(article_ids))
            .order_by(ArticleTagModel.id)
        )
        tags: dict[int, list[str]] = defaultdict(list)
        for article_id, tag_name in result.all():
            tags[article_id].append(tag_name)
        return dict(tags)
