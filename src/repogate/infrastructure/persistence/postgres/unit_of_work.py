"""PostgreSQL Unit of Work implementation."""

from collections.abc import Iterator
from contextlib import contextmanager

from psycopg_pool import ConnectionPool

from repogate.infrastructure.persistence.postgres.privilege_repository import (
    PostgresPrivilegeRepository,
)
from repogate.infrastructure.persistence.postgres.repository_registry import (
    PostgresRepositoryRegistry,
)
from repogate.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from repogate.infrastructure.persistence.postgres.selector_repository import (
    PostgresSelectorRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool
        self._conn = None
        self._conn_cm = None

    def __enter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = self._conn_cm.__enter__()
        self._repositories = PostgresRepositoryRegistry(self._conn)
        self._privileges = PostgresPrivilegeRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._selectors = PostgresSelectorRepository(self._conn)
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            self._conn.rollback()
        if self._conn_cm:
            self._conn_cm.__exit__(exc_type, exc_val, exc_tb)

    @property
    def repositories(self) -> PostgresRepositoryRegistry:
        return self._repositories

    @property
    def privileges(self) -> PostgresPrivilegeRepository:
        return self._privileges

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def selectors(self) -> PostgresSelectorRepository:
        return self._selectors

    def commit(self) -> None:
        if self._conn:
            self._conn.commit()

    def rollback(self) -> None:
        if self._conn:
            self._conn.rollback()


def create_uow_factory(pool: ConnectionPool):
    """Create UnitOfWork factory (context manager)."""

    @contextmanager
    def factory() -> Iterator[PostgresUnitOfWork]:
        with PostgresUnitOfWork(pool) as uow:
            try:
                yield uow
                uow.commit()
            except BaseException:
                uow.rollback()
                raise

    return factory
