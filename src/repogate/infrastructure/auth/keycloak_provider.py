"""Keycloak OIDC provider for token introspection."""

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from repogate.infrastructure.auth.principal import Principal
from repogate.infrastructure.logging import get_logger

logger = get_logger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts the principal."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> Principal | None:
        """Introspect token, return principal or None if inactive or invalid."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("token_introspection_failed", error=str(e))
            return None
        if not token_info.get("active"):
            return None
        return Principal(
            user_id=token_info.get("sub", ""),
            username=token_info.get("preferred_username"),
            email=token_info.get("email"),
            realm_roles=frozenset(token_info.get("realm_access", {}).get("roles", [])),
        )
