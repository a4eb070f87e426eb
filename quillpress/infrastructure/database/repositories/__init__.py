from .article_repository import SQLAlchemyArticleRepository
from .article_tag_repository import SQLAlchemyArticleTagRepository
from .article_like_repository import SQLAlchemyArticleLikeRepository
from .user_profile_repository import SQLAlchemyUserProfileRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyArticleTagRepository",
    "SQLAlchemyArticleLikeRepository",
    "SQLAlchemyUserProfileRepository",
]
