"""SQLAlchemy database session and engine configuration."""

from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from quillpress.config import get_settings


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, echo: bool = False, **engine_options) -> AsyncEngine:
    """Create the async engine for ``url`` with per-backend connection options."""
    async_url = _get_async_url(url)
    if async_url.startswith("sqlite"):
        async_engine = create_async_engine(
            async_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            **engine_options,
        )
        _enable_sqlite_foreign_keys(async_engine.sync_engine)
        return async_engine
    return create_async_engine(async_url, echo=echo, pool_pre_ping=True, **engine_options)


settings = get_settings()

engine = build_engine(settings.database_url, echo=settings.database_echo)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request.

    The whole request runs in one transaction: every write it makes is
    committed together, or rolled back together when the handler raises.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
