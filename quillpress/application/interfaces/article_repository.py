"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from datetime import datetime

from quillpress.domain.entities import Article, ArticleSearch, ArticleStatus


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID, whatever its status."""
        ...

    @abstractmethod
    async def get_owned(self, article_id: int, author_id: str) -> Article | None:
        """Retrieve an article only if it belongs to the given author."""
        ...

    @abstractmethod
    async def get_published_by_slug(self, slug: str) -> Article | None:
        """Retrieve a published article by its slug."""
        ...

    @abstractmethod
    async def slug_exists(self, slug: str) -> bool:
        ...

    @abstractmethod
    async def search(self, criteria: ArticleSearch) -> list[Article]:
        """Published articles matching the criteria, ordered and capped."""
        ...

    @abstractmethod
    async def trending(self, published_since: datetime, limit: int) -> list[tuple[Article, float]]:
        """Published articles newer than the cutoff with their trending score, best first."""
        ...

    @abstractmethod
    async def list_by_status(self, statuses: list[ArticleStatus]) -> list[Article]:
        """Articles in any of the given statuses, newest first."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def increment_views(self, article_id: int) -> None:
        """Add one to the article's view counter."""
        ...
