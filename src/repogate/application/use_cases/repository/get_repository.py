"""Get repository use case."""

from repogate.application.ports import AuditStore
from repogate.application.security import RepositoryPermissionChecker
from repogate.application.use_cases.audit.record_audit import record_audit
from repogate.domain.entities import Repository
from repogate.domain.exceptions import NotFound, PermissionDenied


class GetRepositoryUseCase:
    """Get a single repository by name."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: RepositoryPermissionChecker,
        audit_store: AuditStore | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._audit_store = audit_store

    def execute(self, user_id: str, name: str) -> Repository:
        """Get repository. Caller must be able to browse it."""
        with self._uow_factory() as uow:
            repository = uow.repositories.get_by_name(name)
        if not repository:
            raise NotFound("Repository", name)

        if not self._permission_checker.can_browse_repository(repository):
            raise PermissionDenied("User does not have browse access to repository")

        record_audit(
            self._audit_store,
            domain="repository",
            type="read",
            context=repository.name,
            initiator=user_id,
            attributes={"format": repository.format},
        )
        return repository
