"""Denormalized read model — an article joined with its author and tags."""

from dataclasses import dataclass, field

from .article import Article


@dataclass
class AuthorSummary:
    """The slice of a user profile shown next to an article."""

    identity_id: str
    username: str | None = None
    avatar_url: str | None = None


@dataclass
class ArticleView:
    """The shape every article read endpoint returns."""

    article: Article
    author: AuthorSummary
    tags: list[str] = field(default_factory=list)
    trending_score: float | None = None
