"""Selector catalog implementation - active selectors from the selector repository."""

from collections.abc import Collection

from repogate.domain.entities import SelectorConfiguration


class RepogateSelectorCatalog:
    """Lists active content selectors, one unit of work per lookup."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    def active_selectors_for(
        self, repository_names: Collection[str], formats: Collection[str]
    ) -> list[SelectorConfiguration]:
        """Active selectors scoped to the repository names and formats."""
        with self._uow_factory() as uow:
            return uow.selectors.browse_active(repository_names, formats)

    def all_active_selectors(self) -> list[SelectorConfiguration]:
        """All active selectors."""
        with self._uow_factory() as uow:
            return uow.selectors.list_active()
