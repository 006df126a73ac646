"""Repository permission checker - browse decisions from direct and selector grants."""

from collections.abc import Sequence

from repogate.application.ports import PermissionOracle, SelectorCatalog
from repogate.domain.entities import Repository
from repogate.domain.value_objects import (
    BreadAction,
    RepositoryContentSelectorPermission,
    RepositoryViewPermission,
    Subject,
)


class RepositoryPermissionChecker:
    """Decides which repositories the current subject may browse.

    Access is granted by a repository-view permission with the browse action,
    or by any active content selector granting browse on the repository.
    """

    def __init__(
        self,
        permission_oracle: PermissionOracle,
        selector_catalog: SelectorCatalog,
    ) -> None:
        self._oracle = permission_oracle
        self._selectors = selector_catalog

    def can_browse_repository(self, repository: Repository) -> bool:
        """Check a single repository.

        Only for one-off checks: every call resolves the subject and lists all
        active selectors. Use can_browse_repositories for several repositories.
        """
        subject = self._oracle.resolve_subject()
        view = RepositoryViewPermission.for_repository(repository, BreadAction.BROWSE)
        if self._oracle.any_permitted(subject, [view]):
            return True

        selectors = self._selectors.all_active_selectors()
        if not selectors:
            return False
        return self._oracle.any_permitted(
            subject,
            [
                RepositoryContentSelectorPermission.for_repository(
                    s, repository, [BreadAction.BROWSE]
                )
                for s in selectors
            ],
        )

    def can_browse_repositories(self, repositories: Sequence[Repository]) -> list[Repository]:
        """Return the repositories the subject may browse.

        Directly permitted repositories come first in input order, followed by
        repositories permitted through a content selector, also in input order.
        Duplicates in the input are kept.
        """
        if not repositories:
            return []

        subject = self._oracle.resolve_subject()
        results = self._oracle.is_permitted(
            subject,
            [RepositoryViewPermission.for_repository(r, BreadAction.BROWSE) for r in repositories],
        )

        permitted: list[Repository] = []
        filtered: list[Repository] = []
        for repository, allowed in zip(repositories, results, strict=True):
            if allowed:
                permitted.append(repository)
            else:
                filtered.append(repository)

        if filtered:
            permitted.extend(self._selector_permitted(subject, filtered))
        return permitted

    def _selector_permitted(
        self, subject: Subject, repositories: list[Repository]
    ) -> list[Repository]:
        names = {r.name for r in repositories}
        formats = {r.format for r in repositories}
        selectors = self._selectors.active_selectors_for(names, formats)
        if not selectors:
            return []

        return [
            repository
            for repository in repositories
            if self._oracle.any_permitted(
                subject,
                [
                    RepositoryContentSelectorPermission.for_repository(
                        s, repository, [BreadAction.BROWSE]
                    )
                    for s in selectors
                ],
            )
        ]
