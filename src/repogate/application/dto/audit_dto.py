"""Audit DTOs."""

from dataclasses import dataclass

from repogate.domain.entities import AuditData


@dataclass
class AuditPage:
    """One page of audit entries plus the approximate total."""

    items: list[AuditData]
    approximate_size: int
    offset: int
    limit: int
