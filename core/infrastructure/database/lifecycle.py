"""Database Lifecycle Management - Async Version"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.settings.sections.database import DatabaseSettings


logger = logging.getLogger(__name__)

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def create_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Create the async engine; pool sizing only applies to server databases."""
    options = {"echo": settings.echo_sql, "future": True}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_recycle=settings.pool_recycle,
            pool_pre_ping=True,
        )
    return create_async_engine(settings.database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    from core.data.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_database(settings: Optional[DatabaseSettings] = None) -> None:
    """Initialize async database engine and session factory, creating tables."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        return

    settings = settings or DatabaseSettings()
    logger.info(f"Initializing database: {settings.database_url}")

    _async_engine = create_engine(settings)
    _async_session_factory = create_session_factory(_async_engine)
    await create_tables(_async_engine)

    logger.info("Database initialized")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _async_session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _async_session_factory


async def close_database() -> None:
    """Close async database engine."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        logger.info("Closing database connections")
        await _async_engine.dispose()
    _async_engine = None
    _async_session_factory = None
