"""Browse audit log use case."""

from repogate.application.dto.audit_dto import AuditPage
from repogate.application.ports import AuditStore
from repogate.domain.exceptions import ValidationError

MAX_PAGE_SIZE = 1000


class BrowseAuditUseCase:
    """Page through the audit log, newest first."""

    def __init__(self, audit_store: AuditStore) -> None:
        self._audit_store = audit_store

    def execute(self, offset: int = 0, limit: int = 100) -> AuditPage:
        """Return entries [offset, offset + limit) and the approximate size."""
        if offset < 0:
            raise ValidationError("offset must be >= 0")
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")

        items = self._audit_store.browse(offset, limit)
        return AuditPage(
            items=items,
            approximate_size=self._audit_store.approximate_size(),
            offset=offset,
            limit=limit,
        )
