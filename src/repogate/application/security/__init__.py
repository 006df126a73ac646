"""Access decisions."""

from repogate.application.security.repository_permission_checker import (
    RepositoryPermissionChecker,
)

__all__ = ["RepositoryPermissionChecker"]
