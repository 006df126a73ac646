"""Browse repositories use case."""

from repogate.application.ports import AuditStore
from repogate.application.security import RepositoryPermissionChecker
from repogate.application.use_cases.audit.record_audit import record_audit
from repogate.domain.entities import Repository


class BrowseRepositoriesUseCase:
    """List hosted repositories the caller may browse."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: RepositoryPermissionChecker,
        audit_store: AuditStore | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._audit_store = audit_store

    def execute(self, user_id: str, format: str | None = None) -> list[Repository]:
        """List repositories, optionally of one format, filtered by browse access."""
        with self._uow_factory() as uow:
            repositories = uow.repositories.list(format=format)

        permitted = self._permission_checker.can_browse_repositories(repositories)
        record_audit(
            self._audit_store,
            domain="repository",
            type="browse",
            context=format or "*",
            initiator=user_id,
            attributes={"total": len(repositories), "permitted": len(permitted)},
        )
        return permitted
