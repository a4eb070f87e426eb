from .read_model import ArticleReadModelComposer
from .article_service import ArticleService
from .moderation_service import ModerationService
from .profile_service import ProfileService

__all__ = [
    "ArticleReadModelComposer",
    "ArticleService",
    "ModerationService",
    "ProfileService",
]
