"""Database Session Manager — one AsyncSession per request, rollback on failure, readiness check.

Invariants:
    - A session that raises is rolled back before the exception leaves this module
    - SQLAlchemy exceptions leave as PersistenceError (core/errors.py); others propagate unchanged
    - Pool options are only passed to server databases; SQLite uses the dialect's default pool

Design Decisions:
    - Module-level db_manager set by the FastAPI lifespan, disposed on shutdown
    - expire_on_commit=False: services read generated ids and flags after save_all()
    - Error mapping is a table walked in order, most specific class first
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from dating_api.core.errors import ErrorContext, PersistenceError

logger = logging.getLogger(__name__)

_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "request"),
)


def to_persistence_error(exc: SQLAlchemyError) -> PersistenceError:
    """Translate a storage exception into the domain error reported to clients."""
    for exc_type, message, operation in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return PersistenceError(
                message, operation,
                ErrorContext(debug_info={"exception": type(exc).__name__}),
            )
    raise TypeError(f"not a SQLAlchemy error: {exc!r}")


def engine_options(
    database_url: str, pool_size: int, max_overflow: int, echo: bool = False,
) -> dict:
    """Keyword arguments for create_async_engine for this kind of database."""
    options: dict = {"echo": echo}
    if make_url(database_url).get_backend_name() != "sqlite":
        options.update(
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return options


class DatabaseSessionManager:
    """Owns the engine and hands out request-scoped sessions."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        self.engine = create_async_engine(
            database_url,
            **engine_options(database_url, pool_size, max_overflow, echo),
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; roll back and translate storage errors on failure."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error: {e}")
            raise to_persistence_error(e) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
