"""Port for the per-article tag store."""

from abc import ABC, abstractmethod


class ArticleTagRepository(ABC):
    """Tags are owned by their article and always replaced as a whole set."""

    @abstractmethod
    async def replace_all(self, article_id: int, tags: list[str]) -> list[str]:
        """Delete every tag of the article, then store the given (normalized) tags."""
        ...

    @abstractmethod
    async def get_for_articles(self, article_ids: list[int]) -> dict[int, list[str]]:
        """Map each article ID to its tags. Articles without tags may be absent."""
        ...
