"""PostgreSQL audit store implementation."""

from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from repogate.domain.entities import AuditData
from repogate.domain.exceptions import LifecycleError
from repogate.infrastructure.logging import get_logger

logger = get_logger(__name__)


class PostgresAuditStore:
    """Audit store backed by the audit_entry table.

    Must be started before use and stopped on shutdown; the pool is owned by
    the caller and has to be open while the store is started.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool
        self._started = False

    @property
    def is_started(self) -> bool:
        return self._started

    def start(self) -> None:
        if self._started:
            return
        with self._pool.connection() as conn:
            conn.execute("SELECT 1 FROM audit_entry LIMIT 1")
        self._started = True
        logger.info("audit_store_started")

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        logger.info("audit_store_stopped")

    def _ensure_started(self) -> None:
        if not self._started:
            raise LifecycleError("Audit store is not started")

    def add(self, data: AuditData) -> None:
        """Append an audit entry."""
        self._ensure_started()
        with self._pool.connection() as conn:
            conn.execute(
                "INSERT INTO audit_entry (id, domain, type, context, initiator, timestamp, attributes) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s)",
                (
                    data.id,
                    data.domain,
                    data.type,
                    data.context,
                    data.initiator,
                    data.timestamp,
                    Jsonb(data.attributes),
                ),
            )

    def clear(self) -> None:
        """Remove all audit entries."""
        self._ensure_started()
        with self._pool.connection() as conn:
            conn.execute("DELETE FROM audit_entry")
        logger.info("audit_store_cleared")

    def approximate_size(self) -> int:
        """Number of stored entries."""
        self._ensure_started()
        with self._pool.connection() as conn:
            r = conn.execute("SELECT count(*) FROM audit_entry").fetchone()
        return r[0] if r else 0

    def browse(self, offset: int, limit: int) -> list[AuditData]:
        """Entries newest first, skipping offset and returning at most limit."""
        self._ensure_started()
        with self._pool.connection() as conn:
            rows = conn.execute(
                "SELECT id, domain, type, context, initiator, timestamp, attributes "
                "FROM audit_entry ORDER BY timestamp DESC, id OFFSET %s LIMIT %s",
                (offset, limit),
            ).fetchall()
        return [
            AuditData(
                id=r[0],
                domain=r[1],
                type=r[2],
                context=r[3],
                initiator=r[4],
                timestamp=r[5],
                attributes=r[6] or {},
            )
            for r in rows
        ]
