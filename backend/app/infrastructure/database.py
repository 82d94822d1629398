"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - One engine per manager; one manager per process, built in the app lifespan
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy and socket exceptions mapped to StoreError (core/errors.py)

Design Decisions:
    - Manager is a plain object handed to the store and health route via app.state,
      not a module-level singleton: tests build their own against in-memory SQLite
    - expire_on_commit=False: returned ORM rows stay readable after the session closes
    - Pool sizing only applies to server databases; SQLite engines use the dialect's pool
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

import app.models  # noqa: F401  (registers tables on Base.metadata)
from app.core.errors import StoreError
from app.db.base import Base

logger = logging.getLogger(__name__)


def _driver_message(exc: SQLAlchemyError) -> str:
    """Underlying driver reason without SQLAlchemy's statement/params dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    options = {"pool_pre_ping": True, "pool_recycle": 3600}
    if not database_url.startswith("sqlite"):
        options.update(pool_size=pool_size, max_overflow=max_overflow)
    return options


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 10, max_overflow: int = 5,
    ):
        self.engine = create_async_engine(
            database_url,
            **_engine_options(database_url, pool_size, max_overflow),
        )
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
            logger.error(f"DB integrity error: {e}")
            raise StoreError(_driver_message(e), "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StoreError(_driver_message(e), "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StoreError(_driver_message(e), "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StoreError(_driver_message(e), "unknown") from e
        except OSError as e:
            logger.error(f"DB connection error: {e}")
            raise StoreError(str(e), "connect") from e
        finally:
            await session.close()

    async def ensure_schema(self) -> None:
        """CREATE TABLE IF NOT EXISTS for every registered model. Idempotent."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StoreError(_driver_message(e), "create_schema") from e
        except OSError as e:
            raise StoreError(str(e), "connect") from e
        logger.info(f"Schema ready: {', '.join(sorted(Base.metadata.tables))}")

    async def health_check(self) -> bool:
        """Check database connectivity (for the readiness route)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except StoreError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
