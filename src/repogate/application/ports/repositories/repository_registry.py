"""Repository registry port."""

from typing import Protocol

from repogate.domain.entities import Repository


class RepositoryRegistry(Protocol):
    """Port for hosted repository lookup."""

    def get_by_name(self, name: str) -> Repository | None: ...

    def list(self, *, format: str | None = None) -> list[Repository]: ...
