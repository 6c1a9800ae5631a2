"""
Process-wide database connection cache.

CONNECTION STRATEGY
===================

One AsyncEngine per process, created lazily on the first get_connection()
call and reused afterwards. The cache object itself is created once by the
application lifespan and handed to request handlers through app.state, so
nothing depends on module import order or re-imports.

Single-flight:
  While the first connection is being established, every other caller
  awaits the same pending task instead of opening its own engine. They all
  receive the same engine, or the same DatabaseConnectionError.

Fail fast:
  The engine is probed with SELECT 1 before it is cached. A caller never
  gets a handle whose work would sit queued behind a connection that is not
  open yet.

Retry:
  A failed attempt clears the pending task. There is no background retry;
  the next caller starts a fresh attempt.
"""

import asyncio
from typing import Any, Callable, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from devevent.core.config import Settings
from devevent.core.errors import ConfigurationError, DatabaseConnectionError
from devevent.core.logging import get_logger
from devevent.core.metrics import record_connection_attempt

logger = get_logger(__name__)

EngineFactory = Callable[..., AsyncEngine]


class ConnectionCache:
    """Holds the live engine and the in-flight connection attempt."""

    def __init__(self, settings: Settings, engine_factory: EngineFactory = create_async_engine):
        self._settings = settings
        self._engine_factory = engine_factory
        self._engine: Optional[AsyncEngine] = None
        self._pending: Optional[asyncio.Task] = None

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    async def get_connection(self) -> AsyncEngine:
        """Return the cached engine, joining or starting a connection attempt if needed."""
        if self._engine is not None:
            return self._engine

        if self._pending is None:
            url = self._settings.DATABASE_URL
            if not url:
                raise ConfigurationError("DATABASE_URL")
            self._pending = asyncio.ensure_future(self._connect(url))

        # Shield so a cancelled caller does not cancel the attempt for the others
        return await asyncio.shield(self._pending)

    def _engine_options(self, url: str) -> dict[str, Any]:
        options: dict[str, Any] = {"echo": self._settings.DEBUG}
        if make_url(url).get_backend_name() != "sqlite":
            options.update(
                pool_size=self._settings.DB_POOL_SIZE,
                max_overflow=self._settings.DB_MAX_OVERFLOW,
                pool_timeout=self._settings.DB_POOL_TIMEOUT,
                pool_recycle=self._settings.DB_POOL_RECYCLE,
                pool_pre_ping=True,
            )
        return options

    async def _connect(self, url: str) -> AsyncEngine:
        engine: Optional[AsyncEngine] = None
        try:
            engine = self._engine_factory(url, **self._engine_options(url))
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except asyncio.CancelledError:
            # dispose() cancelled the attempt mid-connect
            if engine is not None:
                await engine.dispose()
            raise
        except Exception as e:
            if engine is not None:
                await engine.dispose()
            record_connection_attempt(success=False)
            logger.error("database_connection_failed", error=str(e))
            raise DatabaseConnectionError(f"Could not connect to the database: {e}") from e
        finally:
            # Cleared on both outcomes; after a failure the next caller retries
            self._pending = None

        self._engine = engine
        record_connection_attempt(success=True)
        logger.info("database_connected", backend=engine.url.get_backend_name())
        return engine

    async def dispose(self) -> None:
        """Release pooled connections at process shutdown, cancelling any attempt still in flight."""
        pending = self._pending
        if pending is not None:
            self._pending = None
            pending.cancel()
            await asyncio.gather(pending, return_exceptions=True)

        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            logger.info("database_disposed")
