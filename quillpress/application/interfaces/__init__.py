from .article_repository import ArticleRepository
from .article_tag_repository import ArticleTagRepository
from .article_like_repository import ArticleLikeRepository
from .user_profile_repository import UserProfileRepository
from .identity_provider import IdentityProvider

__all__ = [
    "ArticleRepository",
    "ArticleTagRepository",
    "ArticleLikeRepository",
    "UserProfileRepository",
    "IdentityProvider",
]
