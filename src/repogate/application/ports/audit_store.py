"""Audit store port - lifecycle-managed audit log."""

from typing import Protocol

from repogate.domain.entities import AuditData


class AuditStore(Protocol):
    """Port for the audit log. Operations are valid only while started."""

    @property
    def is_started(self) -> bool: ...

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def add(self, data: AuditData) -> None: ...

    def clear(self) -> None: ...

    def approximate_size(self) -> int: ...

    def browse(self, offset: int, limit: int) -> list[AuditData]: ...
