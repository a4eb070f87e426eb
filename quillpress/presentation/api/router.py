"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from quillpress.presentation.api.endpoints.health import router as health_router
from quillpress.presentation.api.endpoints.articles import router as articles_router
from quillpress.presentation.api.endpoints.admin import router as admin_router
from quillpress.presentation.api.endpoints.users import router as users_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(admin_router)
router.include_router(users_router)
