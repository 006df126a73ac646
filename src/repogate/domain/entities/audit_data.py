"""Audit entry entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass
class AuditData:
    """Single audit record - what happened (domain/type), to what, by whom."""

    id: UUID
    domain: str
    type: str
    context: str
    initiator: str
    timestamp: datetime
    attributes: dict[str, Any] = field(default_factory=dict)
