"""Unit tests for ASGI middleware."""

import threading
from types import SimpleNamespace
from unittest.mock import MagicMock, Mock

import pytest

from repogate.domain.exceptions import SubjectResolutionError
from repogate.infrastructure.auth.principal import ANONYMOUS, Principal, current_principal
from repogate.interfaces.api.middleware.auth import AuthMiddleware
from repogate.interfaces.api.middleware.lifespan import LifespanMiddleware


def _request(authorization: str | None = None) -> SimpleNamespace:
    return SimpleNamespace(
        get_header=lambda name: authorization if name == "Authorization" else None,
        context=SimpleNamespace(),
    )


@pytest.mark.asyncio
async def test_lifespan_opens_pool_before_starting_store() -> None:
    calls = MagicMock()
    pool, store = calls.pool, calls.store
    middleware = LifespanMiddleware(pool, store)

    await middleware.process_startup({}, {})
    await middleware.process_shutdown({}, {})

    assert [c[0] for c in calls.mock_calls] == ["pool.open", "store.start", "store.stop", "pool.close"]


@pytest.mark.asyncio
async def test_lifespan_without_audit_store() -> None:
    pool = MagicMock()
    middleware = LifespanMiddleware(pool)

    await middleware.process_startup({}, {})
    await middleware.process_shutdown({}, {})

    pool.open.assert_called_once_with(wait=True)
    pool.close.assert_called_once_with()


@pytest.mark.asyncio
async def test_lifespan_blocking_calls_leave_event_loop_thread() -> None:
    """Pool and store lifecycle calls run in worker threads."""
    threads = []
    pool, store = MagicMock(), MagicMock()
    for method in (pool.open, pool.close, store.start, store.stop):
        method.side_effect = lambda *a, **kw: threads.append(threading.get_ident())
    middleware = LifespanMiddleware(pool, store)

    await middleware.process_startup({}, {})
    await middleware.process_shutdown({}, {})

    assert len(threads) == 4
    assert threading.get_ident() not in threads


@pytest.mark.asyncio
async def test_auth_binds_and_resets_principal() -> None:
    principal = Principal(user_id="alice")
    keycloak = Mock()
    keycloak.decode_token.return_value = principal
    middleware = AuthMiddleware(keycloak)
    req = _request("Bearer abc")

    await middleware.process_request(req, None)
    assert req.context.user is principal
    assert current_principal() is principal
    keycloak.decode_token.assert_called_once_with("abc")

    await middleware.process_response(req, None, None, True)
    with pytest.raises(SubjectResolutionError):
        current_principal()


@pytest.mark.asyncio
async def test_auth_no_header_is_anonymous() -> None:
    middleware = AuthMiddleware()
    req = _request()

    await middleware.process_request(req, None)
    try:
        assert req.context.user is ANONYMOUS
    finally:
        await middleware.process_response(req, None, None, True)


@pytest.mark.asyncio
async def test_auth_bearer_without_provider_rejected() -> None:
    middleware = AuthMiddleware()
    req = _request("Bearer abc")

    await middleware.process_request(req, None)
    try:
        assert req.context.user is None
        with pytest.raises(SubjectResolutionError):
            current_principal()
    finally:
        await middleware.process_response(req, None, None, True)
