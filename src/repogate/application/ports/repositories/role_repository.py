"""Role repository port."""

from typing import Protocol


class RoleRepository(Protocol):
    """Port for role assignments."""

    def list_names_for_subject(self, subject: str) -> list[str]: ...
