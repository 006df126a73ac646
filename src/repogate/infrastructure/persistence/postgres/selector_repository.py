"""PostgreSQL content selector repository implementation."""

from collections.abc import Collection

from psycopg import Connection

from repogate.domain.entities import PrivilegeType, SelectorConfiguration

_ACTIVE_SELECTORS = (
    "SELECT DISTINCT s.name, s.type, s.description, s.expression "
    "FROM content_selector s "
    "JOIN privilege p ON p.selector_name = s.name AND p.type = %s"
)


def _row_to_selector(r: tuple) -> SelectorConfiguration:
    return SelectorConfiguration(name=r[0], type=r[1], description=r[2] or "", expression=r[3])


class PostgresSelectorRepository:
    """Content selector repository implementation.

    A selector is active when a content-selector privilege references it.
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def browse_active(
        self, repository_names: Collection[str], formats: Collection[str]
    ) -> list[SelectorConfiguration]:
        """List active selectors whose privilege scope covers the names and formats."""
        if not repository_names or not formats:
            return []
        cur = self._conn.execute(
            _ACTIVE_SELECTORS
            + " WHERE (p.repository = '*' OR p.repository = ANY(%s))"
            " AND (p.format = '*' OR p.format = ANY(%s))"
            " ORDER BY s.name",
            (
                PrivilegeType.REPOSITORY_CONTENT_SELECTOR.value,
                sorted(repository_names),
                sorted(formats),
            ),
        )
        return [_row_to_selector(r) for r in cur.fetchall()]

    def list_active(self) -> list[SelectorConfiguration]:
        """List all active selectors."""
        cur = self._conn.execute(
            _ACTIVE_SELECTORS + " ORDER BY s.name",
            (PrivilegeType.REPOSITORY_CONTENT_SELECTOR.value,),
        )
        return [_row_to_selector(r) for r in cur.fetchall()]
