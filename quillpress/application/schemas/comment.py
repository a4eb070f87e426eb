"""Pydantic DTOs for comments."""

from pydantic import Field

from .common import CamelModel


class CommentCreate(CamelModel):
    article_id: int
    content: str = Field(..., min_length=1, max_length=1000)
    parent_comment_id: int | None = None
