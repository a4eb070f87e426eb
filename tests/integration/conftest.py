"""Fixtures wiring the FastAPI app to an in-memory SQLite database."""

from collections.abc import AsyncGenerator, AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from quillpress.infrastructure.database import Base
from quillpress.infrastructure.database.session import build_engine, get_db_session
from quillpress.infrastructure.dependencies import get_identity_provider
from quillpress.main import app

from tests.integration.helpers import IDENTITIES
from tests.unit.fakes import FakeIdentityProvider


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    async def _session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    provider = FakeIdentityProvider(dict(IDENTITIES))
    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_identity_provider] = lambda: provider

    # Errors are answered by the app's own 500 handler instead of raised here.
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()
