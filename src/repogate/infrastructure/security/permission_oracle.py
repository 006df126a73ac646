"""Permission oracle implementation - evaluates privileges of the subject's roles."""

from collections.abc import Callable, Iterable, Sequence

from repogate.domain.entities import Privilege
from repogate.domain.value_objects import Permission, Subject
from repogate.infrastructure.auth.principal import Principal, current_principal


class RepogatePermissionOracle:
    """Resolves the bound principal and checks permissions against stored privileges.

    Privileges are loaded once per check call and never cached between calls.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        principal_provider: Callable[[], Principal] = current_principal,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._principal_provider = principal_provider

    def resolve_subject(self) -> Subject:
        """Resolve the current principal to a subject with its role names."""
        principal = self._principal_provider()
        with self._uow_factory() as uow:
            roles = uow.roles.list_names_for_subject(principal.user_id)
        return Subject(
            principal=principal.user_id,
            roles=frozenset(roles) | principal.realm_roles,
        )

    def _privileges(self, subject: Subject) -> list[Privilege]:
        if not subject.roles:
            return []
        with self._uow_factory() as uow:
            return uow.privileges.list_for_roles(subject.roles)

    def any_permitted(self, subject: Subject, permissions: Iterable[Permission]) -> bool:
        """Check if at least one permission is granted."""
        permissions = list(permissions)
        if not permissions:
            return False
        privileges = self._privileges(subject)
        return any(p.implies(perm) for perm in permissions for p in privileges)

    def is_permitted(self, subject: Subject, permissions: Sequence[Permission]) -> list[bool]:
        """Check each permission, results in input order."""
        if not permissions:
            return []
        privileges = self._privileges(subject)
        return [any(p.implies(perm) for p in privileges) for perm in permissions]
