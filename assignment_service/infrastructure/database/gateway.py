"""Data access gateway — pooled async engine running one statement per call.

The gateway owns the connection pool and nothing else: it does not retry,
cache, or interpret results. Driver failures are translated into the typed
errors from ``assignment_service.domain.exceptions`` so callers can branch on
the error kind instead of on message text.

Usage:
    gateway = DatabaseGateway.from_settings(get_settings())
    rows = await gateway.fetch_all(select(table).where(table.c.category.ilike(pattern)))
    await gateway.dispose()
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from sqlalchemy import MetaData, exc as sa_exc, text
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.sql.expression import Executable

from assignment_service.config import Settings
from assignment_service.domain.exceptions import (
    ConstraintViolationError,
    StoreConnectionError,
    StoreError,
    StoreTimeoutError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CONNECTION_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,  # pool checkout timeout
    OSError,
)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_engine(
    database_url: str,
    *,
    echo: bool = False,
    pool_size: int = 5,
    max_overflow: int = 10,
) -> AsyncEngine:
    """Create the async engine (and its pool) for a database URL."""
    async_url = _get_async_url(database_url)
    options: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}
    # SQLite picks its own pool class, which does not accept sizing arguments
    if not async_url.startswith("sqlite"):
        options.update(pool_size=pool_size, max_overflow=max_overflow)
    return create_async_engine(async_url, **options)


def _error_text(error: BaseException) -> str:
    """Raw driver message, without SQLAlchemy's statement/background decoration."""
    if isinstance(error, sa_exc.DBAPIError) and error.orig is not None:
        return str(error.orig)
    return str(error) or type(error).__name__


def translate_error(error: BaseException) -> StoreError:
    """Map a driver/SQLAlchemy failure onto the store error taxonomy."""
    detail = _error_text(error)
    if isinstance(error, sa_exc.IntegrityError):
        return ConstraintViolationError(detail)
    if isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated:
        return StoreConnectionError(detail)
    if isinstance(error, _CONNECTION_ERRORS):
        return StoreConnectionError(detail)
    return StoreError(detail)


class DatabaseGateway:
    """Executes single parameterized statements on a pooled async engine."""

    def __init__(self, engine: AsyncEngine, statement_timeout: float | None = None):
        self._engine = engine
        self._statement_timeout = (
            statement_timeout if statement_timeout and statement_timeout > 0 else None
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseGateway":
        engine = build_engine(
            settings.database_url,
            echo=settings.db_echo,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )
        return cls(engine, statement_timeout=settings.db_statement_timeout)

    async def fetch_all(
        self, statement: Executable, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Run a read and return every row as a plain dict."""
        return await self._run(
            statement, params, lambda result: [dict(row) for row in result.mappings()]
        )

    async def fetch_one(
        self, statement: Executable, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Run a statement and return its first row, or None when there is none."""

        def first(result: CursorResult) -> dict[str, Any] | None:
            row = result.mappings().first()
            return dict(row) if row is not None else None

        return await self._run(statement, params, first)

    async def execute(
        self, statement: Executable, params: Mapping[str, Any] | None = None
    ) -> int:
        """Run a write and return the number of affected rows."""
        return await self._run(statement, params, lambda result: result.rowcount)

    async def ping(self) -> None:
        """Round-trip a trivial query; raises a StoreError when the store is unreachable."""
        await self.fetch_one(text("SELECT 1"))

    async def create_schema(self, metadata: MetaData) -> None:
        """Create missing tables. Existing tables are left untouched."""
        await self._bounded(self._create_all(metadata))

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()

    async def _run(
        self,
        statement: Executable,
        params: Mapping[str, Any] | None,
        consume: Callable[[CursorResult], T],
    ) -> T:
        return await self._bounded(self._execute(statement, params, consume))

    async def _bounded(self, call: Awaitable[T]) -> T:
        """Await one store call under the statement timeout."""
        try:
            return await asyncio.wait_for(
                self._translated(call), timeout=self._statement_timeout
            )
        except asyncio.TimeoutError as e:
            # Only wait_for expiring lands here; driver timeouts were translated inside
            logger.warning("Statement exceeded %ss timeout", self._statement_timeout)
            raise StoreTimeoutError(
                f"statement did not complete within {self._statement_timeout}s"
            ) from e

    async def _translated(self, call: Awaitable[T]) -> T:
        try:
            return await call
        except (asyncio.TimeoutError, TimeoutError) as e:
            # Raised by the driver itself (e.g. connect timeout): keep its text
            logger.debug("Driver timed out: %s", e)
            raise StoreTimeoutError(_error_text(e)) from e
        except (sa_exc.SQLAlchemyError, OSError) as e:
            error = translate_error(e)
            logger.debug("Statement failed (%s): %s", type(error).__name__, error.detail)
            raise error from e

    async def _create_all(self, metadata: MetaData) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def _execute(
        self,
        statement: Executable,
        params: Mapping[str, Any] | None,
        consume: Callable[[CursorResult], T],
    ) -> T:
        # One short transaction per statement; committed on exit
        async with self._engine.begin() as conn:
            result = await conn.execute(statement, params)
            return consume(result)
