"""Helpers shared by the integration tests."""

from datetime import datetime, timezone

from quillpress.config import get_settings
from quillpress.domain.entities import Article, ArticleStatus, Identity
from quillpress.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyArticleTagRepository,
)

IDENTITIES = {
    "admin-token": Identity(id="admin", email="admin@example.com", display_name="Admin"),
    "ada-token": Identity(id="ada", email="ada@example.com", display_name="ada", avatar_url="https://img/ada.png"),
    "bob-token": Identity(id="bob", email="bob@example.com", display_name="bob"),
}


def as_user(token: str) -> dict[str, str]:
    """Cookies that authenticate a request as the identity behind ``token``."""
    return {get_settings().session_cookie_name: token}


async def seed_article(
    session_factory,
    *,
    title: str,
    author_id: str = "ada",
    status: ArticleStatus = ArticleStatus.PUBLISHED,
    published_at: datetime | None = None,
    content: str = "body",
    excerpt: str | None = None,
    tags: list[str] | None = None,
    likes: int = 0,
    views: int = 0,
    comments: int = 0,
) -> Article:
    """Insert an article directly, bypassing the API, with chosen counters and dates."""
    if status == ArticleStatus.PUBLISHED and published_at is None:
        published_at = datetime.now(timezone.utc)
    async with session_factory() as session:
        repository = SQLAlchemyArticleRepository(session)
        article = await repository.create(
            Article(
                title=title,
                slug=f"{title.lower().replace(' ', '-')}-seed",
                content=content,
                excerpt=excerpt,
                author_id=author_id,
                status=status,
                published_at=published_at,
                likes_count=likes,
                views_count=views,
                comments_count=comments,
            )
        )
        if tags:
            await SQLAlchemyArticleTagRepository(session).replace_all(article.id, tags)
        await session.commit()
    return article
