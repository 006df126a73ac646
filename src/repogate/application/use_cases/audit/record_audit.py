"""Audit recording shared by use cases."""

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from repogate.application.ports import AuditStore
from repogate.domain.entities import AuditData
from repogate.infrastructure.logging import get_logger

logger = get_logger(__name__)


def record_audit(
    audit_store: AuditStore | None,
    *,
    domain: str,
    type: str,
    context: str,
    initiator: str,
    attributes: dict[str, Any] | None = None,
) -> AuditData | None:
    """Add an audit entry if a started store is wired. Returns the entry added.

    A failing store never aborts the caller: the failure is logged and None returned.
    """
    if audit_store is None or not audit_store.is_started:
        return None
    data = AuditData(
        id=uuid4(),
        domain=domain,
        type=type,
        context=context,
        initiator=initiator,
        timestamp=datetime.now(UTC),
        attributes=attributes or {},
    )
    try:
        audit_store.add(data)
    except Exception:
        logger.warning(
            "audit_record_failed",
            domain=domain,
            type=type,
            context=context,
            initiator=initiator,
            exc_info=True,
        )
        return None
    return data
