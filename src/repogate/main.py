"""Application entry point and composition root."""

from repogate import __version__
from repogate.application.security import RepositoryPermissionChecker
from repogate.application.use_cases.audit.browse_audit import BrowseAuditUseCase
from repogate.application.use_cases.audit.clear_audit import ClearAuditUseCase
from repogate.application.use_cases.repository.browse_repositories import (
    BrowseRepositoriesUseCase,
)
from repogate.application.use_cases.repository.get_repository import GetRepositoryUseCase
from repogate.config import get_settings
from repogate.infrastructure.auth.keycloak_provider import KeycloakProvider
from repogate.infrastructure.logging import get_logger, setup_logging
from repogate.infrastructure.persistence.postgres.audit_store import PostgresAuditStore
from repogate.infrastructure.persistence.postgres.connection import create_pool
from repogate.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from repogate.infrastructure.security.permission_oracle import RepogatePermissionOracle
from repogate.infrastructure.security.selector_catalog import RepogateSelectorCatalog
from repogate.interfaces.api.app import create_app
from repogate.interfaces.api.middleware.auth import AuthMiddleware
from repogate.interfaces.api.middleware.lifespan import LifespanMiddleware
from repogate.interfaces.api.resources.audit import AuditResource
from repogate.interfaces.api.resources.health import HealthResource
from repogate.interfaces.api.resources.repositories import (
    RepositoriesResource,
    RepositoryResource,
)

logger = get_logger(__name__)


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    logger.info("starting", version=__version__, environment=settings.environment)
    uvicorn.run(
        "repogate.main:create_repogate_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )


def create_repogate_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    setup_logging(settings)
    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    permission_checker = RepositoryPermissionChecker(
        permission_oracle=RepogatePermissionOracle(uow_factory),
        selector_catalog=RepogateSelectorCatalog(uow_factory),
    )
    audit_store = PostgresAuditStore(pool) if settings.audit_enabled else None

    browse_repositories = BrowseRepositoriesUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
        audit_store=audit_store,
    )
    get_repository = GetRepositoryUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
        audit_store=audit_store,
    )
    audit_resource = (
        AuditResource(
            BrowseAuditUseCase(audit_store),
            ClearAuditUseCase(audit_store),
            admin_role=settings.audit_admin_role,
        )
        if audit_store is not None
        else None
    )

    return create_app(
        repositories_resource=RepositoriesResource(browse_repositories),
        repository_resource=RepositoryResource(get_repository),
        audit_resource=audit_resource,
        health_resource=HealthResource(audit_store),
        middleware=[
            LifespanMiddleware(pool, audit_store),
            AuthMiddleware(keycloak),
        ],
    )


if __name__ == "__main__":
    main()
