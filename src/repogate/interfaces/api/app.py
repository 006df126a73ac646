"""Falcon ASGI application."""

import falcon.asgi

from repogate.infrastructure.logging import get_logger
from repogate.interfaces.api.resources.audit import AuditResource
from repogate.interfaces.api.resources.health import HealthResource
from repogate.interfaces.api.resources.repositories import (
    RepositoriesResource,
    RepositoryResource,
)

logger = get_logger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unexpected exceptions and answer 500."""
    logger.error(
        "unhandled_exception",
        method=req.method,
        path=req.path,
        exc_info=(type(ex), ex, ex.__traceback__),
    )
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    repositories_resource: RepositoriesResource,
    repository_resource: RepositoryResource,
    audit_resource: AuditResource | None,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> falcon.asgi.App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/repositories", repositories_resource)
    app.add_route("/v1/repositories/{name}", repository_resource)
    if audit_resource is not None:
        app.add_route("/v1/audit", audit_resource)
    return app
