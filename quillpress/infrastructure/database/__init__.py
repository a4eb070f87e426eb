from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import (
    ArticleModel,
    ArticleTagModel,
    ArticleLikeModel,
    UserProfileModel,
    CommentModel,
)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "ArticleModel",
    "ArticleTagModel",
    "ArticleLikeModel",
    "UserProfileModel",
    "CommentModel",
]
