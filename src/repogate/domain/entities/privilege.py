"""Privilege entity - a grant attached to roles."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID

from repogate.domain.value_objects.bread_action import WILDCARD
from repogate.domain.value_objects.permission import (
    Permission,
    RepositoryContentSelectorPermission,
    RepositoryViewPermission,
)


class PrivilegeType(StrEnum):
    """Kinds of privileges that can grant repository access."""

    REPOSITORY_VIEW = "repository-view"
    REPOSITORY_CONTENT_SELECTOR = "repository-content-selector"


def _matches(granted: str, requested: str) -> bool:
    return granted == WILDCARD or granted == requested


@dataclass
class Privilege:
    """Privilege - actions on repositories by format and name, '*' matches any.

    Content-selector privileges are additionally bound to one selector.
    """

    id: UUID
    name: str
    type: PrivilegeType
    format: str
    repository: str
    actions: frozenset[str] = field(default_factory=frozenset)
    selector: str | None = None

    def grants(self, action: str) -> bool:
        """Check whether the privilege grants a single action."""
        return WILDCARD in self.actions or action in self.actions

    def implies(self, permission: Permission) -> bool:
        """Check whether holding this privilege implies the permission."""
        if not (
            _matches(self.format, permission.format)
            and _matches(self.repository, permission.repository)
        ):
            return False
        if isinstance(permission, RepositoryViewPermission):
            return self.type == PrivilegeType.REPOSITORY_VIEW and self.grants(permission.action)
        if isinstance(permission, RepositoryContentSelectorPermission):
            return (
                self.type == PrivilegeType.REPOSITORY_CONTENT_SELECTOR
                and self.selector == permission.selector
                and bool(permission.actions)
                and all(self.grants(a) for a in permission.actions)
            )
        return False
