"""Like ledger backed by SQLAlchemy.

The ledger row and the article's likes_count are written in the session's
transaction, so they commit or roll back together.
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quillpress.application.interfaces import ArticleLikeRepository
from quillpress.infrastructure.database.models import ArticleLikeModel, ArticleModel


class SQLAlchemyArticleLikeRepository(ArticleLikeRepository):
    """Implements the ArticleLikeRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get(self, article_id: int, user_id: str) -> ArticleLikeModel | None:
        result = await self._session.execute(
            select(ArticleLikeModel).where(
                ArticleLikeModel.article_id == article_id,
                ArticleLikeModel.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def toggle(self, article_id: int, user_id: str) -> bool:
        like = await self._get(article_id, user_id)
        if like is not None:
            await self._session.delete(like)
            delta = -1
        else:
            self._session.add(ArticleLikeModel(article_id=article_id, user_id=user_id))
            delta = 1
        await self._session.flush()

        await self._session.execute(
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(likes_count=ArticleModel.likes_count + delta)
        )
        return like is None
