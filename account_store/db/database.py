"""
Database Module

Declarative base, engine factory and health check for the
embedded SQLite database.

The store keeps exactly one SQLite connection open: the engine is
built on a StaticPool, so every session checks out the same handle.
"""

import logging
from pathlib import Path
from typing import Union

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from account_store.core.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for_path(db_path: Union[str, Path]) -> AsyncEngine:
    """
    Create the async engine for a SQLite database file.

    Args:
        db_path: Database file, created on first connect if missing

    Returns:
        AsyncEngine holding a single shared connection
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{Path(db_path)}",
        echo=settings.SQLALCHEMY_ECHO,
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the shared engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def check_db_connection(engine: AsyncEngine) -> bool:
    """
    Check that the database answers a trivial query.

    Returns:
        True if the query succeeded, False otherwise
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False
