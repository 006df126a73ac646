"""Domain entities."""

from repogate.domain.entities.audit_data import AuditData
from repogate.domain.entities.privilege import Privilege, PrivilegeType
from repogate.domain.entities.repository import Repository
from repogate.domain.entities.selector_configuration import SelectorConfiguration

__all__ = [
    "AuditData",
    "Privilege",
    "PrivilegeType",
    "Repository",
    "SelectorConfiguration",
]
