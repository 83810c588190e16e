"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to InternalError (core/errors.py);
      store detail goes to the log, never to the caller
    - A write is committed only via commit_or_rollback: commit or full rollback

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - No retry here: a failed commit is reported immediately, retry policy
      belongs to the driver/client configuration
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from notekeeper.core.errors import ErrorContext, InternalError, NotekeeperError
from notekeeper.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        # SQLite uses a static/null pool; sizing arguments are rejected there
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}", extra={"operation": "commit"})
            raise InternalError("commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}", extra={"operation": "execute"})
            raise InternalError("execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}", extra={"operation": "query"})
            raise InternalError("query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": "unknown"})
            raise InternalError("unknown")
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create all tables from ORM metadata (dev / tests; no migrations)."""
        import notekeeper.models  # noqa: F401  (populate Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (NotekeeperError, SQLAlchemyError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def commit_or_rollback(
    db: AsyncSession,
    operation: str,
    context: ErrorContext | None = None,
    on_integrity: NotekeeperError | None = None,
) -> NotekeeperError | None:
    """Commit the open transaction; on failure roll it back wholly.

    Returns None on success, otherwise the error the caller should report:
    `on_integrity` for a constraint violation when given, InternalError for
    everything else.
    """
    ctx = context or ErrorContext()
    extra = {
        "operation": operation,
        "principal_id": ctx.principal_id,
        "profile_id": ctx.profile_id,
        "note_id": ctx.note_id,
    }
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        if on_integrity is not None:
            logger.warning(f"DB {operation} hit a constraint: {e.orig}", extra=extra)
            return on_integrity
        logger.error(f"DB {operation} integrity error: {e}", extra=extra)
        return InternalError(operation, ctx)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"DB {operation} failed: {e}", extra=extra)
        return InternalError(operation, ctx)
    return None


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
