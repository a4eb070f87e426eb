"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime
from typing import Annotated

from pydantic import Field

from quillpress.domain.entities import ArticleStatus
from quillpress.domain.entities.search import TAG_MAX_LENGTH

from .common import CamelModel, UrlOrEmpty

TagName = Annotated[str, Field(max_length=TAG_MAX_LENGTH)]


class ArticleCreate(CamelModel):
    """Schema for submitting a new article."""

    title: str = Field(..., min_length=1, max_length=200, examples=["Hello World"])
    content: str = Field(..., min_length=1, examples=["# Hi"])
    excerpt: str | None = Field(None, max_length=500)
    cover_image_url: UrlOrEmpty | None = None
    tags: list[TagName] | None = Field(None, max_length=10)


class ArticleUpdate(CamelModel):
    """Schema for editing an article — all fields optional.

    Omitted tags leave the stored tags untouched; an empty excerpt or cover
    URL clears the field.
    """

    title: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = Field(None, max_length=500)
    cover_image_url: UrlOrEmpty | None = None
    tags: list[TagName] | None = Field(None, max_length=10)


class ArticleCreatedResponse(CamelModel):
    id: int
    slug: str


class AuthorResponse(CamelModel):
    username: str | None = None
    avatar_url: str | None = None
    identity_id: str


class ArticleResponse(CamelModel):
    """Public composed article: fields, author, tags and counters."""

    id: int
    title: str
    slug: str
    content: str
    excerpt: str | None = None
    cover_image_url: str | None = None
    author_id: str
    status: ArticleStatus
    published_at: datetime | None = None
    views_count: int
    likes_count: int
    comments_count: int
    created_at: datetime
    updated_at: datetime
    author: AuthorResponse
    tags: list[str]


class TrendingArticleResponse(ArticleResponse):
    trending_score: float


class AdminArticleResponse(ArticleResponse):
    """Article as shown in the moderation queue."""

    admin_notes: str | None = None


class ArticleEditResponse(CamelModel):
    """Raw article for its author's editor, whatever its status."""

    id: int
    title: str
    slug: str
    content: str
    excerpt: str | None = None
    cover_image_url: str | None = None
    author_id: str
    status: ArticleStatus
    published_at: datetime | None = None
    views_count: int
    likes_count: int
    comments_count: int
    admin_notes: str | None = None
    created_at: datetime
    updated_at: datetime
    tags: list[str]


class LikeToggleResponse(CamelModel):
    liked: bool


class ArticleStatusUpdate(CamelModel):
    """Administrator decision on an article."""

    status: ArticleStatus
    admin_notes: str | None = None
