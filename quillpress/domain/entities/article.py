"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ArticleStatus(str, Enum):
    """Moderation states of an article."""

    DRAFT = "draft"
    PENDING = "pending"
    PUBLISHED = "published"
    REJECTED = "rejected"
    HIDDEN = "hidden"


@dataclass
class Article:
    """Core domain entity representing an authored Markdown article."""

    title: str
    slug: str
    content: str
    author_id: str
    id: int | None = None
    excerpt: str | None = None
    cover_image_url: str | None = None
    status: ArticleStatus = ArticleStatus.PENDING
    published_at: datetime | None = None
    views_count: int = 0
    likes_count: int = 0
    comments_count: int = 0
    admin_notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_editable(self) -> bool:
        """Authors may only edit articles that were never published."""
        return self.published_at is None

    def is_owned_by(self, user_id: str) -> bool:
        return self.author_id == user_id

    def update(
        self,
        title: str | None = None,
        content: str | None = None,
        excerpt: str | None = ...,  # type: ignore[assignment]
        cover_image_url: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Apply an author edit and refresh the updated_at timestamp.

        ``...`` leaves excerpt / cover untouched, ``None`` clears them.
        """
        if title:
            self.title = title
        if content:
            self.content = content
        if excerpt is not ...:
            self.excerpt = excerpt
        if cover_image_url is not ...:
            self.cover_image_url = cover_image_url
        self.updated_at = datetime.now(timezone.utc)

    def set_status(
        self,
        status: ArticleStatus,
        admin_notes: str | None = None,
        now: datetime | None = None,
    ) -> None:
        """Apply an administrator status decision.

        Any status may follow any other. Entering ``published`` stamps
        published_at the first time only; restoring a hidden article keeps
        the original publication date.
        """
        now = now or datetime.now(timezone.utc)
        self.status = status
        self.admin_notes = admin_notes
        if status == ArticleStatus.PUBLISHED and self.published_at is None:
            self.published_at = now
        self.updated_at = now
