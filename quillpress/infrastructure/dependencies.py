"""FastAPI dependency injection — wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from quillpress.config import get_settings
from quillpress.application.interfaces import IdentityProvider
from quillpress.application.services import (
    ArticleReadModelComposer,
    ArticleService,
    ModerationService,
    ProfileService,
)
from quillpress.domain.entities import Identity
from quillpress.infrastructure.database.session import get_db_session
from quillpress.infrastructure.database.repositories import (
    SQLAlchemyArticleLikeRepository,
    SQLAlchemyArticleRepository,
    SQLAlchemyArticleTagRepository,
    SQLAlchemyUserProfileRepository,
)
from quillpress.infrastructure.identity import UsersServiceClient

logger = logging.getLogger(__name__)


def _build_composer(session: AsyncSession) -> ArticleReadModelComposer:
    return ArticleReadModelComposer(
        tag_repository=SQLAlchemyArticleTagRepository(session),
        profile_repository=SQLAlchemyUserProfileRepository(session),
    )


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with its repositories wired to the request session."""
    yield ArticleService(
        repository=SQLAlchemyArticleRepository(session),
        tag_repository=SQLAlchemyArticleTagRepository(session),
        like_repository=SQLAlchemyArticleLikeRepository(session),
        composer=_build_composer(session),
    )


async def get_moderation_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ModerationService, None]:
    """Provides a ModerationService for the admin endpoints."""
    yield ModerationService(
        repository=SQLAlchemyArticleRepository(session),
        profile_repository=SQLAlchemyUserProfileRepository(session),
        composer=_build_composer(session),
    )


async def get_profile_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProfileService, None]:
    """Provides a ProfileService instance with its repository wired up."""
    yield ProfileService(SQLAlchemyUserProfileRepository(session))


def get_identity_provider() -> IdentityProvider:
    """Provides the users service client configured from settings."""
    settings = get_settings()
    return UsersServiceClient(
        api_url=settings.users_service_api_url,
        api_key=settings.users_service_api_key,
        timeout=settings.users_service_timeout,
    )


def _session_token(request: Request) -> str | None:
    """Session cookie first, then an ``Authorization: Bearer`` header."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if token:
        return token
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


async def get_current_identity(
    request: Request,
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity:
    """Resolve the caller's identity or answer 401.

    IdentityProviderError propagates and is reported as a 500.
    """
    token = _session_token(request)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    identity = await provider.get_current_user(token)
    if identity is None:
        logger.debug("Session rejected by identity provider")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return identity
