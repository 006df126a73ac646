"""Permissions checked against privileges.

Two shapes exist: a repository-view permission carries a single action on one
repository, a content-selector permission carries a set of actions on one
repository through one selector. Both are immutable and hashable so they can
be passed through batched checks in any collection type.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from repogate.domain.value_objects.bread_action import BreadAction

if TYPE_CHECKING:
    from repogate.domain.entities.repository import Repository
    from repogate.domain.entities.selector_configuration import SelectorConfiguration


@dataclass(frozen=True)
class RepositoryViewPermission:
    """Permission to perform an action on a repository."""

    format: str
    repository: str
    action: str

    @classmethod
    def for_repository(
        cls, repository: "Repository", action: BreadAction | str
    ) -> "RepositoryViewPermission":
        return cls(format=repository.format, repository=repository.name, action=str(action))


@dataclass(frozen=True)
class RepositoryContentSelectorPermission:
    """Permission to perform actions on repository content matched by a selector."""

    selector: str
    format: str
    repository: str
    actions: frozenset[str]

    @classmethod
    def for_repository(
        cls,
        selector: "SelectorConfiguration",
        repository: "Repository",
        actions: Iterable[BreadAction | str],
    ) -> "RepositoryContentSelectorPermission":
        return cls(
            selector=selector.name,
            format=repository.format,
            repository=repository.name,
            actions=frozenset(str(a) for a in actions),
        )


Permission = RepositoryViewPermission | RepositoryContentSelectorPermission
