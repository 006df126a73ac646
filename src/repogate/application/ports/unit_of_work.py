"""Unit of Work port - transactional boundary."""

from contextlib import AbstractContextManager
from typing import Protocol

from repogate.application.ports.repositories.privilege_repository import (
    PrivilegeRepository,
)
from repogate.application.ports.repositories.repository_registry import (
    RepositoryRegistry,
)
from repogate.application.ports.repositories.role_repository import RoleRepository
from repogate.application.ports.repositories.selector_repository import (
    SelectorRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def repositories(self) -> RepositoryRegistry: ...

    @property
    def privileges(self) -> PrivilegeRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def selectors(self) -> SelectorRepository: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    def __call__(self) -> AbstractContextManager[UnitOfWork]: ...
