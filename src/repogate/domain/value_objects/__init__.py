"""Domain value objects."""

from repogate.domain.value_objects.bread_action import WILDCARD, BreadAction
from repogate.domain.value_objects.permission import (
    Permission,
    RepositoryContentSelectorPermission,
    RepositoryViewPermission,
)
from repogate.domain.value_objects.subject import Subject

__all__ = [
    "WILDCARD",
    "BreadAction",
    "Permission",
    "RepositoryContentSelectorPermission",
    "RepositoryViewPermission",
    "Subject",
]
