"""Database engine and session management.

One async engine per process. Each API request gets its own session
from ``get_session``, committed when the handler returns and rolled
back when it raises.
"""

from collections.abc import AsyncGenerator

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from storefront.infrastructure.config import settings

logger = structlog.get_logger()

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    # Waiting for a pooled connection counts against the store timeout
    pool_timeout=settings.store_timeout_seconds,
)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


class Base(DeclarativeBase):
    """Declarative base for catalog tables."""


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            logger.debug("Rolling back request session")
            await session.rollback()
            raise


async def create_tables(drop: bool = False) -> None:
    """Create catalog tables that don't exist yet.

    Args:
        drop: Drop the existing catalog tables first.
    """
    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
