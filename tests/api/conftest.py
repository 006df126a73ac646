"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from repogate.application.security import RepositoryPermissionChecker
from repogate.application.use_cases.audit.browse_audit import BrowseAuditUseCase
from repogate.application.use_cases.audit.clear_audit import ClearAuditUseCase
from repogate.application.use_cases.repository.browse_repositories import (
    BrowseRepositoriesUseCase,
)
from repogate.application.use_cases.repository.get_repository import GetRepositoryUseCase
from repogate.domain.entities import PrivilegeType, Repository
from repogate.infrastructure.auth.principal import Principal
from repogate.infrastructure.security.permission_oracle import RepogatePermissionOracle
from repogate.infrastructure.security.selector_catalog import RepogateSelectorCatalog
from repogate.interfaces.api.app import create_app
from repogate.interfaces.api.middleware.auth import AuthMiddleware
from repogate.interfaces.api.resources.audit import AuditResource
from repogate.interfaces.api.resources.health import HealthResource
from repogate.interfaces.api.resources.repositories import (
    RepositoriesResource,
    RepositoryResource,
)


class FakeKeycloak:
    """Token -> principal lookup standing in for Keycloak introspection."""

    TOKENS = {
        "alice-token": Principal(user_id="alice", username="alice"),
        "admin-token": Principal(user_id="root", username="root", realm_roles=frozenset({"admin"})),
    }

    def decode_token(self, token: str) -> Principal | None:
        return self.TOKENS.get(token)


@pytest.fixture
def realm(fake_uow):
    """maven/npm/pypi repositories; alice browses maven directly and pypi via a selector."""
    fake_uow.repositories.add(
        Repository(name="maven-central", format="maven", url="https://repo1.maven.org/maven2/"),
        Repository(name="npm-proxy", format="npm"),
        Repository(name="pypi-proxy", format="pypi"),
    )
    fake_uow.roles.assign("alice", "maven-browser")
    fake_uow.privileges.grant("maven-browser", format="maven")
    fake_uow.roles.assign("alice", "python-selector")
    fake_uow.selectors.add("python-only", expression="format == 'pypi'")
    fake_uow.privileges.grant(
        "python-selector",
        type=PrivilegeType.REPOSITORY_CONTENT_SELECTOR,
        format="pypi",
        selector="python-only",
    )
    fake_uow.privileges.grant("admin", actions=("*",))
    return fake_uow


@pytest.fixture
def app(realm, uow_factory, audit_store):
    """Falcon ASGI app with API resources over in-memory fakes."""
    checker = RepositoryPermissionChecker(
        permission_oracle=RepogatePermissionOracle(uow_factory),
        selector_catalog=RepogateSelectorCatalog(uow_factory),
    )
    return create_app(
        repositories_resource=RepositoriesResource(
            BrowseRepositoriesUseCase(uow_factory, checker, audit_store)
        ),
        repository_resource=RepositoryResource(
            GetRepositoryUseCase(uow_factory, checker, audit_store)
        ),
        audit_resource=AuditResource(
            BrowseAuditUseCase(audit_store),
            ClearAuditUseCase(audit_store),
        ),
        health_resource=HealthResource(audit_store),
        middleware=[AuthMiddleware(FakeKeycloak())],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
