from .common import CamelModel, SuccessResponse, UrlOrEmpty
from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleCreatedResponse,
    ArticleResponse,
    AdminArticleResponse,
    ArticleEditResponse,
    ArticleStatusUpdate,
    AuthorResponse,
    LikeToggleResponse,
    TrendingArticleResponse,
)
from .profile import ProfileUpdate, UserProfileResponse, CurrentUserResponse
from .comment import CommentCreate

__all__ = [
    "CamelModel",
    "SuccessResponse",
    "UrlOrEmpty",
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleCreatedResponse",
    "ArticleResponse",
    "AdminArticleResponse",
    "ArticleEditResponse",
    "ArticleStatusUpdate",
    "AuthorResponse",
    "LikeToggleResponse",
    "TrendingArticleResponse",
    "ProfileUpdate",
    "UserProfileResponse",
    "CurrentUserResponse",
    "CommentCreate",
]
