"""PostgreSQL repository registry implementation."""

from psycopg import Connection

from repogate.domain.entities import Repository

_COLUMNS = "name, format, url, online"


def _row_to_repository(r: tuple) -> Repository:
    return Repository(name=r[0], format=r[1], url=r[2], online=r[3])


class PostgresRepositoryRegistry:
    """Repository registry implementation."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get_by_name(self, name: str) -> Repository | None:
        """Get repository by name."""
        r = self._conn.execute(
            f"SELECT {_COLUMNS} FROM repository WHERE name = %s",
            (name,),
        ).fetchone()
        return _row_to_repository(r) if r else None

    def list(self, *, format: str | None = None) -> list[Repository]:
        """List repositories ordered by name, optionally of one format."""
        if format:
            cur = self._conn.execute(
                f"SELECT {_COLUMNS} FROM repository WHERE format = %s ORDER BY name",
                (format,),
            )
        else:
            cur = self._conn.execute(f"SELECT {_COLUMNS} FROM repository ORDER BY name")
        return [_row_to_repository(r) for r in cur.fetchall()]
