"""Permission oracle port - subject resolution and permission evaluation."""

from collections.abc import Iterable, Sequence
from typing import Protocol

from repogate.domain.value_objects import Permission, Subject


class PermissionOracle(Protocol):
    """Port for checking whether permissions are granted to a subject."""

    def resolve_subject(self) -> Subject: ...

    def any_permitted(self, subject: Subject, permissions: Iterable[Permission]) -> bool: ...

    def is_permitted(self, subject: Subject, permissions: Sequence[Permission]) -> list[bool]: ...
