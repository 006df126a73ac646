"""Application ports - interfaces for external adapters."""

from repogate.application.ports.audit_store import AuditStore
from repogate.application.ports.permission_oracle import PermissionOracle
from repogate.application.ports.selector_catalog import SelectorCatalog
from repogate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuditStore",
    "PermissionOracle",
    "SelectorCatalog",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
