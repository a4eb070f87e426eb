"""Map domain read models to API response schemas."""

from quillpress.application.schemas import (
    AdminArticleResponse,
    ArticleEditResponse,
    ArticleResponse,
    AuthorResponse,
    TrendingArticleResponse,
    UserProfileResponse,
)
from quillpress.domain.entities import ArticleView, UserProfile


def _article_fields(view: ArticleView) -> dict:
    article = view.article
    return {
        "id": article.id,
        "title": article.title,
        "slug": article.slug,
        "content": article.content,
        "excerpt": article.excerpt,
        "cover_image_url": article.cover_image_url,
        "author_id": article.author_id,
        "status": article.status,
        "published_at": article.published_at,
        "views_count": article.views_count,
        "likes_count": article.likes_count,
        "comments_count": article.comments_count,
        "created_at": article.created_at,
        "updated_at": article.updated_at,
        "tags": view.tags,
    }


def _author(view: ArticleView) -> AuthorResponse:
    return AuthorResponse(
        username=view.author.username,
        avatar_url=view.author.avatar_url,
        identity_id=view.author.identity_id,
    )


def to_article_response(view: ArticleView) -> ArticleResponse:
    return ArticleResponse(**_article_fields(view), author=_author(view))


def to_trending_response(view: ArticleView) -> TrendingArticleResponse:
    return TrendingArticleResponse(
        **_article_fields(view),
        author=_author(view),
        trending_score=view.trending_score or 0.0,
    )


def to_admin_response(view: ArticleView) -> AdminArticleResponse:
    return AdminArticleResponse(
        **_article_fields(view),
        author=_author(view),
        admin_notes=view.article.admin_notes,
    )


def to_edit_response(view: ArticleView) -> ArticleEditResponse:
    return ArticleEditResponse(**_article_fields(view), admin_notes=view.article.admin_notes)


def to_profile_response(profile: UserProfile) -> UserProfileResponse:
    return UserProfileResponse(
        id=profile.id,
        external_id=profile.external_id,
        username=profile.username,
        bio=profile.bio,
        avatar_url=profile.avatar_url,
        is_admin=profile.is_admin,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )
