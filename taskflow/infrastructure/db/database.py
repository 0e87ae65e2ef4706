"""
Database configuration and session management.
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Create declarative base
Base = declarative_base()


def create_engine(database_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """
    Create the async SQLAlchemy engine.
    Extra keyword arguments are passed through (e.g. ``poolclass`` for tests).
    """
    return create_async_engine(database_url, echo=echo, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used by the repositories; one session per repository call."""
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create every table registered on ``Base``."""
    from . import models  # noqa: F401  registers the tables on Base.metadata

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop every table registered on ``Base``."""
    from . import models  # noqa: F401

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped")
