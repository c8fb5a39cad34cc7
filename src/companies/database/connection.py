"""
Database connection management
"""

import os
import threading
from collections.abc import AsyncGenerator, Generator
from contextlib import asynccontextmanager, contextmanager
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)

# Global shared connection pools
_engine = None
_async_engine = None
_session_local = None
_async_session_local = None
_initialized = False
_init_lock = threading.Lock()

ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


def get_database_url() -> str:
    """Get database URL, checking the environment first so tests can override it."""
    return os.getenv("COMPANIES_DATABASE_URL") or settings.database_url


def to_async_url(db_url: str) -> str:
    """Map a sync database URL onto the matching async driver."""
    for prefix, async_prefix in ASYNC_DRIVERS.items():
        if db_url.startswith(prefix):
            return db_url.replace(prefix, async_prefix, 1)
    return db_url


def engine_options(db_url: str) -> dict[str, Any]:
    """Engine keyword arguments for a database URL.

    SQLite connections are opened per checkout; a file database is required
    because the sync and async engines must see the same data.
    """
    options: dict[str, Any] = {"echo": settings.sql_echo}
    if db_url.startswith("sqlite"):
        options["poolclass"] = NullPool
    else:
        options["pool_size"] = settings.database_pool_size
        options["max_overflow"] = settings.database_max_overflow
    return options


def reset_database():
    """Reset database connections (for tests)."""
    global _engine, _async_engine, _session_local, _async_session_local, _initialized
    _engine = None
    _async_engine = None
    _session_local = None
    _async_session_local = None
    _initialized = False


async def test_database_connection() -> tuple[bool, str | None]:
    """
    Test the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _async_engine is None:
        return False, "Database engine not initialized"

    try:
        async with _async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "does not exist" in error_str and "role" in error_str:
            db_name = get_database_url().split("/")[-1].split("?")[0]
            return False, (
                f"Cannot connect to database: {error_str}\n"
                f"This usually means:\n"
                f"  1. The database server is not running\n"
                f"  2. The database '{db_name}' doesn't exist\n"
                f"  3. The database user/role doesn't exist\n"
                f"Please check your database connection and run migrations if needed."
            )
        elif "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        elif "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"


def init_database(database_url: str | None = None, force_reinit: bool = False):
    """Initialize shared database connection pools.

    Thread-safe initialization using a lock to prevent race conditions
    when multiple threads attempt to initialize simultaneously.
    """
    global _engine, _async_engine, _session_local, _async_session_local, _initialized

    # Fast path: already initialized, no lock needed
    if _initialized and not force_reinit and database_url is None:
        return

    with _init_lock:
        # Another thread may have initialized while we waited
        if _initialized and not force_reinit and database_url is None:
            return

        db_url = database_url or get_database_url()

        _engine = create_engine(db_url, **engine_options(db_url))
        _session_local = sessionmaker(autocommit=False, autoflush=False, bind=_engine)

        async_db_url = to_async_url(db_url)
        _async_engine = create_async_engine(async_db_url, **engine_options(db_url))
        _async_session_local = async_sessionmaker(
            _async_engine,
            class_=AsyncSession,
            autocommit=False,
            autoflush=False,
        )

        _initialized = True
        logger.info("Database initialized", database_url=_engine.url.render_as_string())


def get_engine():
    """Get the shared SQLAlchemy engine."""
    if _engine is None:
        init_database()
    return _engine


def get_async_engine():
    """Get the shared async SQLAlchemy engine."""
    if _async_engine is None:
        init_database()
    return _async_engine


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get a database session (sync) from shared pool."""
    if _session_local is None:
        init_database()

    if _session_local is None:
        raise RuntimeError("Database not initialized")

    session = _session_local()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session (async) from shared pool."""
    if _async_session_local is None:
        init_database()

    if _async_session_local is None:
        raise RuntimeError("Async database not available")

    async with _async_session_local() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# Dependency for FastAPI
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_async_session() as session:
        yield session
