"""PostgreSQL privilege repository implementation."""

from collections.abc import Collection

from psycopg import Connection

from repogate.domain.entities import Privilege, PrivilegeType


class PostgresPrivilegeRepository:
    """Privilege repository implementation."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def list_for_roles(self, role_names: Collection[str]) -> list[Privilege]:
        """List distinct privileges granted to any of the roles."""
        if not role_names:
            return []
        cur = self._conn.execute(
            "SELECT DISTINCT p.id, p.name, p.type, p.format, p.repository, p.actions, p.selector_name "
            "FROM privilege p "
            "JOIN role_privilege rp ON rp.privilege_id = p.id "
            "JOIN role r ON r.id = rp.role_id "
            "WHERE r.name = ANY(%s)",
            (list(role_names),),
        )
        return [
            Privilege(
                id=r[0],
                name=r[1],
                type=PrivilegeType(r[2]),
                format=r[3],
                repository=r[4],
                actions=frozenset(r[5] or []),
                selector=r[6],
            )
            for r in cur.fetchall()
        ]
