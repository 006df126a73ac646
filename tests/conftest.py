"""Pytest fixtures for repogate tests."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from uuid import uuid4

import pytest

from repogate.domain.entities import (
    AuditData,
    Privilege,
    PrivilegeType,
    Repository,
    SelectorConfiguration,
)
from repogate.domain.exceptions import LifecycleError
from repogate.infrastructure.auth.principal import (
    Principal,
    bind_principal,
    reset_principal,
)


# --- Fake repositories ---


class FakeRepositoryRegistry:
    """In-memory repository registry."""

    def __init__(self) -> None:
        self._by_name: dict[str, Repository] = {}

    def get_by_name(self, name: str) -> Repository | None:
        return self._by_name.get(name)

    def list(self, *, format: str | None = None) -> list[Repository]:
        items = [r for r in self._by_name.values() if not format or r.format == format]
        return sorted(items, key=lambda r: r.name)

    def add(self, *repositories: Repository) -> None:
        """Helper to register repositories for tests."""
        for r in repositories:
            self._by_name[r.name] = r


class FakeRoleRepository:
    """In-memory role assignments by subject."""

    def __init__(self) -> None:
        self._assignments: dict[str, set[str]] = {}  # subject -> {role name}

    def list_names_for_subject(self, subject: str) -> list[str]:
        return sorted(self._assignments.get(subject, set()))

    def assign(self, subject: str, role_name: str) -> None:
        """Helper to assign role to subject."""
        self._assignments.setdefault(subject, set()).add(role_name)


class FakePrivilegeRepository:
    """In-memory privilege repository keyed by granting role."""

    def __init__(self) -> None:
        self._by_id: dict = {}
        self._by_role: dict[str, set] = {}  # role name -> {privilege id}

    def list_for_roles(self, role_names) -> list[Privilege]:
        ids: set = set()
        for name in role_names:
            ids |= self._by_role.get(name, set())
        return [self._by_id[i] for i in ids]

    def all(self) -> list[Privilege]:
        return list(self._by_id.values())

    def grant(
        self,
        role_name: str,
        *,
        type: PrivilegeType = PrivilegeType.REPOSITORY_VIEW,
        format: str = "*",
        repository: str = "*",
        actions: tuple[str, ...] = ("browse",),
        selector: str | None = None,
    ) -> Privilege:
        """Helper to create a privilege and grant it to role."""
        privilege = Privilege(
            id=uuid4(),
            name=f"{type}-{selector or ''}-{format}-{repository}",
            type=type,
            format=format,
            repository=repository,
            actions=frozenset(actions),
            selector=selector,
        )
        self._by_id[privilege.id] = privilege
        self._by_role.setdefault(role_name, set()).add(privilege.id)
        return privilege


class FakeSelectorRepository:
    """In-memory selector repository - active means referenced by a selector privilege."""

    def __init__(self, privileges_repo: FakePrivilegeRepository) -> None:
        self._by_name: dict[str, SelectorConfiguration] = {}
        self._privileges_repo = privileges_repo

    def _selector_privileges(self) -> list[Privilege]:
        return [
            p
            for p in self._privileges_repo.all()
            if p.type == PrivilegeType.REPOSITORY_CONTENT_SELECTOR
        ]

    def browse_active(self, repository_names, formats) -> list[SelectorConfiguration]:
        names = {
            p.selector
            for p in self._selector_privileges()
            if (p.repository == "*" or p.repository in repository_names)
            and (p.format == "*" or p.format in formats)
        }
        return [self._by_name[n] for n in sorted(names) if n in self._by_name]

    def list_active(self) -> list[SelectorConfiguration]:
        names = {p.selector for p in self._selector_privileges()}
        return [self._by_name[n] for n in sorted(names) if n in self._by_name]

    def add(self, name: str, expression: str = "format == 'maven2'") -> SelectorConfiguration:
        """Helper to add selector for tests."""
        selector = SelectorConfiguration(name=name, type="csel", expression=expression)
        self._by_name[name] = selector
        return selector


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.repositories = FakeRepositoryRegistry()
        self.roles = FakeRoleRepository()
        self.privileges = FakePrivilegeRepository()
        self.selectors = FakeSelectorRepository(privileges_repo=self.privileges)

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        pass


# --- Fake audit store ---


class FakeAuditStore:
    """In-memory audit store with the same lifecycle guards as the real one."""

    def __init__(self, started: bool = True) -> None:
        self._entries: list[AuditData] = []
        self._started = started

    @property
    def is_started(self) -> bool:
        return self._started

    def start(self) -> None:
        self._started = True

    def stop(self) -> None:
        self._started = False

    def _ensure_started(self) -> None:
        if not self._started:
            raise LifecycleError("Audit store is not started")

    def add(self, data: AuditData) -> None:
        self._ensure_started()
        self._entries.append(data)

    def clear(self) -> None:
        self._ensure_started()
        self._entries.clear()

    def approximate_size(self) -> int:
        self._ensure_started()
        return len(self._entries)

    def browse(self, offset: int, limit: int) -> list[AuditData]:
        self._ensure_started()
        newest_first = sorted(self._entries, key=lambda a: a.timestamp, reverse=True)
        return newest_first[offset : offset + limit]


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning context manager that yields the same FakeUnitOfWork."""

    @contextmanager
    def _factory() -> Iterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def audit_store() -> FakeAuditStore:
    """Started in-memory audit store."""
    return FakeAuditStore()


@pytest.fixture
def bind_user():
    """Bind a principal to the current context for the duration of a test."""
    tokens = []

    def _bind(user_id: str, realm_roles: tuple[str, ...] = ()) -> Principal:
        principal = Principal(user_id=user_id, realm_roles=frozenset(realm_roles))
        tokens.append(bind_principal(principal))
        return principal

    yield _bind
    for token in reversed(tokens):
        reset_principal(token)
