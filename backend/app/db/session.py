"""
Async engine and session lifecycle.

The engine is built exactly once by init_db() during application startup and
disposed by close_db() on shutdown. Nothing here is created at import time.
"""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import get_settings
from app.core.logging import get_logger
from app.db.base import Base

logger = get_logger(__name__)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _engine_options(url: str) -> dict:
    settings = get_settings()
    options = {"echo": settings.DEBUG, "pool_pre_ping": True}
    # SQLite has no server-side pool to size
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    return options


async def init_db(url: Optional[str] = None, create_tables: bool = False) -> AsyncEngine:
    """Create the engine and session factory. Idempotent."""
    global _engine, _session_factory

    if _engine is not None:
        return _engine

    url = url or get_settings().DATABASE_URL
    _engine = create_async_engine(url, **_engine_options(url))
    _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)

    if create_tables:
        async with _engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    logger.info("database_initialized", dialect=_engine.dialect.name)
    return _engine


async def close_db() -> None:
    """Dispose the engine on shutdown."""
    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
        logger.info("database_closed")
    _engine = None
    _session_factory = None


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        raise RuntimeError("Database is not initialized; call init_db() at startup")
    return _session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency: one session per request.
    Commits when the request succeeds, rolls back on any exception.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
