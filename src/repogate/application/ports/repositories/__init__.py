"""Repository ports."""

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

__all__ = [
    "PrivilegeRepository",
    "RepositoryRegistry",
    "RoleRepository",
    "SelectorRepository",
]
