"""PostgreSQL role repository implementation."""

from psycopg import Connection


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def list_names_for_subject(self, subject: str) -> list[str]:
        """List names of roles assigned to subject."""
        cur = self._conn.execute(
            "SELECT r.name FROM role r JOIN subject_role sr ON sr.role_id = r.id "
            "WHERE sr.subject = %s ORDER BY r.name",
            (subject,),
        )
        return [r[0] for r in cur.fetchall()]
