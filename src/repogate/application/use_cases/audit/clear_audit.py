"""Clear audit log use case."""

from repogate.application.ports import AuditStore
from repogate.application.use_cases.audit.record_audit import record_audit


class ClearAuditUseCase:
    """Remove all audit entries."""

    def __init__(self, audit_store: AuditStore) -> None:
        self._audit_store = audit_store

    def execute(self, user_id: str) -> None:
        """Clear the log, leaving a single entry recording who cleared it."""
        self._audit_store.clear()
        record_audit(
            self._audit_store,
            domain="audit",
            type="clear",
            context="audit",
            initiator=user_id,
        )
