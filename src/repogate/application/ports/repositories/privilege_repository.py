"""Privilege repository port."""

from collections.abc import Collection
from typing import Protocol

from repogate.domain.entities import Privilege


class PrivilegeRepository(Protocol):
    """Port for privilege persistence."""

    def list_for_roles(self, role_names: Collection[str]) -> list[Privilege]: ...
