"""Health check endpoint — reports app metadata and database reachability."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from quillpress.config import get_settings
from quillpress.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_db_session)) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except Exception as exc:
        logger.warning("Health check could not reach the database: %s", exc)
        database = "unavailable"
    return {
        "status": "healthy" if database == "ok" else "degraded",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": database,
    }
