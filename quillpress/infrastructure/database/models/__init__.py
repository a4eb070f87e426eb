from .article import ArticleModel, ArticleTagModel, ArticleLikeModel
from .user_profile import UserProfileModel
from .comment import CommentModel

__all__ = [
    "ArticleModel",
    "ArticleTagModel",
    "ArticleLikeModel",
    "UserProfileModel",
    "CommentModel",
]
