from .article import Article, ArticleStatus
from .article_view import ArticleView, AuthorSummary
from .search import ArticleSearch, SortMode
from .user_profile import Identity, UserProfile

__all__ = [
    "Article",
    "ArticleStatus",
    "ArticleView",
    "AuthorSummary",
    "ArticleSearch",
    "SortMode",
    "Identity",
    "UserProfile",
]
