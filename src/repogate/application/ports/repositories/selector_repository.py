"""Content selector repository port."""

from collections.abc import Collection
from typing import Protocol

from repogate.domain.entities import SelectorConfiguration


class SelectorRepository(Protocol):
    """Port for content selector persistence."""

    def browse_active(
        self, repository_names: Collection[str], formats: Collection[str]
    ) -> list[SelectorConfiguration]: ...

    def list_active(self) -> list[SelectorConfiguration]: ...
