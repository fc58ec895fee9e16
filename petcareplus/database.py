"""
PetCarePlus Backend: Database Session Management
==================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine on the configured URL and provides a
       per-request session that rolls back on error and always closes.
Who:   Used by route handlers via FastAPI's dependency injection system;
       services receive the session as an argument.
When:  Engine is created at module import; sessions are created per-request.

Pool sizing is left at the driver's default. The application never runs a
multi-statement transaction: every service method issues one statement and
commits it.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from petcareplus.config import settings

logger = logging.getLogger(__name__)


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(
    settings.sqlalchemy_url,
    pool_pre_ping=settings.db_pool_pre_ping,
    echo=settings.log_level == "DEBUG",
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: rows stay readable after commit for serialization
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the models, the Alembic migration
    environment and the test suite's schema setup.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (services commit their own write)
        3. On error: rolls back anything left pending
        4. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/owners")
        async def list_owners(db: AsyncSession = Depends(get_db_session)):
            return await owner_service.list_all(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def check_connection() -> bool:
    """
    What:  Runs `SELECT 1` against the store and logs the outcome.
    When:  Once during application startup.

    A failure is logged, not raised: the server still starts and each
    request reports its own "Database error" until the store is reachable.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error("Error connecting to database: %s", str(e))
        return False
    logger.info("Connected to database: %s", engine.url.database)
    return True


async def dispose_engine() -> None:
    """Gracefully closes all connections in the pool (application shutdown)."""
    await engine.dispose()
