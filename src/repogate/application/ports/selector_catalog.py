"""Selector catalog port - active content selector lookup."""

from collections.abc import Collection
from typing import Protocol

from repogate.domain.entities import SelectorConfiguration


class SelectorCatalog(Protocol):
    """Port for listing active content selectors."""

    def active_selectors_for(
        self, repository_names: Collection[str], formats: Collection[str]
    ) -> list[SelectorConfiguration]: ...

    def all_active_selectors(self) -> list[SelectorConfiguration]: ...
