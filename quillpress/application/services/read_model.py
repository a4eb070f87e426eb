"""Composes article rows into the denormalized shape served by read endpoints."""

from quillpress.application.interfaces import ArticleTagRepository, UserProfileRepository
from quillpress.domain.entities import Article, ArticleView, AuthorSummary


class ArticleReadModelComposer:
    """Joins articles with their author profiles and tag sets.

    Profiles and tags are fetched in one query each for the whole batch.
    """

    def __init__(self, tag_repository: ArticleTagRepository, profile_repository: UserProfileRepository):
        self._tags = tag_repository
        self._profiles = profile_repository

    async def compose(
        self,
        articles: list[Article],
        scores: list[float] | None = None,
    ) -> list[ArticleView]:
        if not articles:
            return []

        article_ids = [a.id for a in articles if a.id is not None]
        tags_by_article = await self._tags.get_for_articles(article_ids)
        profiles = await self._profiles.get_many(sorted({a.author_id for a in articles}))

        views: list[ArticleView] = []
        for index, article in enumerate(articles):
            profile = profiles.get(article.author_id)
            author = AuthorSummary(
                identity_id=article.author_id,
                username=profile.username if profile else None,
                avatar_url=profile.avatar_url if profile else None,
            )
            views.append(
                ArticleView(
                    article=article,
                    author=author,
                    tags=list(tags_by_article.get(article.id, [])),
                    trending_score=scores[index] if scores is not None else None,
                )
            )
        return views

    async def compose_one(self, article: Article) -> ArticleView:
        views = await self.compose([article])
        return views[0]
