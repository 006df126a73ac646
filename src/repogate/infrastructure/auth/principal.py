"""Principal bound to the current request context."""

from contextvars import ContextVar, Token
from dataclasses import dataclass, field

from repogate.domain.exceptions import SubjectResolutionError


@dataclass(frozen=True)
class Principal:
    """Authenticated caller as seen by the identity provider."""

    user_id: str
    username: str | None = None
    email: str | None = None
    realm_roles: frozenset[str] = field(default_factory=frozenset)


ANONYMOUS = Principal(user_id="anonymous", username="anonymous")

_current_principal: ContextVar[Principal | None] = ContextVar(
    "repogate_principal", default=None
)


def bind_principal(principal: Principal | None) -> Token:
    """Bind the principal for the current context. Returns a reset token."""
    return _current_principal.set(principal)


def reset_principal(token: Token) -> None:
    _current_principal.reset(token)


def current_principal() -> Principal:
    """Return the bound principal or raise SubjectResolutionError."""
    principal = _current_principal.get()
    if principal is None:
        raise SubjectResolutionError("No authenticated principal bound to context")
    return principal
