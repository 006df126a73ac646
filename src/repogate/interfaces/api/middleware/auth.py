"""Auth middleware - resolves the principal from the bearer token or allows anonymous."""

import falcon.asgi

from repogate.infrastructure.auth.principal import (
    ANONYMOUS,
    Principal,
    bind_principal,
    reset_principal,
)


class AuthMiddleware:
    """Middleware that validates the token, sets req.context.user and binds the principal."""

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    def _authenticate(self, req: falcon.asgi.Request) -> Principal | None:
        auth = req.get_header("Authorization")
        if not auth:
            return ANONYMOUS
        if auth.startswith("Bearer ") and self._keycloak:
            return self._keycloak.decode_token(auth[7:])
        return None

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract principal from Authorization header."""
        principal = self._authenticate(req)
        req.context.user = principal
        req.context.principal_token = bind_principal(principal)

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        token = getattr(req.context, "principal_token", None)
        if token is not None:
            reset_principal(token)
