"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quillpress.application.interfaces import ArticleRepository
from quillpress.domain.entities import Article, ArticleSearch, ArticleStatus, SortMode
from quillpress.domain.entities.search import (
    TRENDING_COMMENT_WEIGHT,
    TRENDING_LIKE_WEIGHT,
    TRENDING_VIEW_WEIGHT,
)
from quillpress.infrastructure.database.models import (
    ArticleModel,
    ArticleTagModel,
    UserProfileModel,
)

# Sort key of SortMode.TRENDING: raw engagement, unlike the weighted feed score.
_ENGAGEMENT = ArticleModel.likes_count + ArticleModel.comments_count

_ORDERINGS = {
    SortMode.LATEST: (ArticleModel.published_at.desc(),),
    SortMode.OLDEST: (ArticleModel.published_at.asc(),),
    SortMode.POPULAR: (ArticleModel.likes_count.desc(), ArticleModel.views_count.desc()),
    SortMode.TRENDING: (_ENGAGEMENT.desc(), ArticleModel.published_at.desc()),
}

_TRENDING_SCORE = (
    ArticleModel.likes_count * TRENDING_LIKE_WEIGHT
    + ArticleModel.comments_count * TRENDING_COMMENT_WEIGHT
    + ArticleModel.views_count * TRENDING_VIEW_WEIGHT
).label("trending_score")


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            slug=model.slug,
            content=model.content,
            excerpt=model.excerpt,
            cover_image_url=model.cover_image_url,
            author_id=model.author_id,
            status=ArticleStatus(model.status),
            published_at=model.published_at,
            views_count=model.views_count,
            likes_count=model.likes_count,
            comments_count=model.comments_count,
            admin_notes=model.admin_notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            slug=entity.slug,
            content=entity.content,
            excerpt=entity.excerpt,
            cover_image_url=entity.cover_image_url,
            author_id=entity.author_id,
            status=entity.status.value,
            published_at=entity.published_at,
            views_count=entity.views_count,
            likes_count=entity.likes_count,
            comments_count=entity.comments_count,
            admin_notes=entity.admin_notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def _first(self, stmt) -> Article | None:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_owned(self, article_id: int, author_id: str) -> Article | None:
        return await self._first(
            select(ArticleModel).where(
                ArticleModel.id == article_id,
                ArticleModel.author_id == author_id,
            )
        )

    async def get_published_by_slug(self, slug: str) -> Article | None:
        return await self._first(
            select(ArticleModel).where(
                ArticleModel.slug == slug,
                ArticleModel.status == ArticleStatus.PUBLISHED.value,
            )
        )

    async def slug_exists(self, slug: str) -> bool:
        result = await self._session.execute(
            select(ArticleModel.id).where(ArticleModel.slug == slug)
        )
        return result.first() is not None

    async def search(self, criteria: ArticleSearch) -> list[Article]:
        stmt = select(ArticleModel).where(ArticleModel.status == ArticleStatus.PUBLISHED.value)

        if criteria.query:
            stmt = stmt.where(
                or_(
                    ArticleModel.title.icontains(criteria.query, autoescape=True),
                    ArticleModel.content.icontains(criteria.query, autoescape=True),
                    ArticleModel.excerpt.icontains(criteria.query, autoescape=True),
                )
            )
        if criteria.author:
            stmt = stmt.join(
                UserProfileModel, UserProfileModel.external_id == ArticleModel.author_id
            ).where(UserProfileModel.username == criteria.author)
        # Every requested tag must be present.
        for tag in criteria.tags:
            stmt = stmt.where(
                select(ArticleTagModel.id)
                .where(
                    ArticleTagModel.article_id == ArticleModel.id,
                    ArticleTagModel.tag_name == tag,
                )
                .exists()
            )

        stmt = stmt.order_by(*_ORDERINGS[criteria.sort_by], ArticleModel.id.desc()).limit(criteria.limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def trending(self, published_since: datetime, limit: int) -> list[tuple[Article, float]]:
        stmt = (
            select(ArticleModel, _TRENDING_SCORE)
            .where(
                ArticleModel.status == ArticleStatus.PUBLISHED.value,
                ArticleModel.published_at > published_since,
            )
            .order_by(_TRENDING_SCORE.desc(), ArticleModel.published_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [(self._to_entity(model), float(score)) for model, score in result.all()]

    async def list_by_status(self, statuses: list[ArticleStatus]) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.status.in_([s.value for s in statuses]))
            .order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.content = article.content
        model.excerpt = article.excerpt
        model.cover_image_url = article.cover_image_url
        model.status = article.status.value
        model.published_at = article.published_at
        model.admin_notes = article.admin_notes
        model.updated_at = article.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def increment_views(self, article_id: int) -> None:
        await self._session.execute(
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(views_count=ArticleModel.views_count + 1)
        )
