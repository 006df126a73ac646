"""Lifespan middleware - opens pool and starts audit store, reverses on shutdown."""

import asyncio
from typing import Any

from psycopg_pool import ConnectionPool

from repogate.application.ports import AuditStore
from repogate.infrastructure.logging import get_logger

logger = get_logger(__name__)


class LifespanMiddleware:
    """Middleware that manages the connection pool and audit store with the ASGI lifespan."""

    def __init__(self, pool: ConnectionPool, audit_store: AuditStore | None = None) -> None:
        self._pool = pool
        self._audit_store = audit_store

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool, then start audit store, off the event loop."""
        await asyncio.to_thread(self._pool.open, wait=True)
        logger.info("connection_pool_opened", max_size=self._pool.max_size)
        if self._audit_store is not None:
            await asyncio.to_thread(self._audit_store.start)

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Stop audit store, then close pool."""
        if self._audit_store is not None:
            await asyncio.to_thread(self._audit_store.stop)
        await asyncio.to_thread(self._pool.close)
        logger.info("connection_pool_closed")
