"""Audit log API resources."""

import asyncio

import falcon.asgi

from repogate.application.use_cases.audit.browse_audit import BrowseAuditUseCase
from repogate.application.use_cases.audit.clear_audit import ClearAuditUseCase
from repogate.domain.entities import AuditData
from repogate.domain.exceptions import LifecycleError, ValidationError


def _audit_to_dict(data: AuditData) -> dict:
    return {
        "id": str(data.id),
        "domain": data.domain,
        "type": data.type,
        "context": data.context,
        "initiator": data.initiator,
        "timestamp": data.timestamp.isoformat(),
        "attributes": data.attributes,
    }


class AuditResource:
    """GET/DELETE /v1/audit - browse and clear the audit log. Requires the admin realm role."""

    def __init__(
        self,
        browse_audit: BrowseAuditUseCase,
        clear_audit: ClearAuditUseCase,
        admin_role: str = "admin",
    ) -> None:
        self._browse = browse_audit
        self._clear = clear_audit
        self._admin_role = admin_role

    def _authorize(self, req: falcon.asgi.Request, resp: falcon.asgi.Response):
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return None
        if self._admin_role not in user.realm_roles:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return None
        return user

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Browse audit entries with ?offset=&limit=."""
        if not self._authorize(req, resp):
            return

        try:
            offset = req.get_param_as_int("offset", default=0)
            limit = req.get_param_as_int("limit", default=100)
            page = await asyncio.to_thread(self._browse.execute, offset, limit)
        except falcon.HTTPInvalidParam as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": e.description}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except LifecycleError:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Audit store unavailable"}
            return

        resp.media = {
            "items": [_audit_to_dict(a) for a in page.items],
            "approximate_size": page.approximate_size,
            "offset": page.offset,
            "limit": page.limit,
        }
        resp.status = falcon.HTTP_200

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Clear the audit log."""
        user = self._authorize(req, resp)
        if not user:
            return

        try:
            await asyncio.to_thread(self._clear.execute, user.user_id)
        except LifecycleError:
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Audit store unavailable"}
            return
        resp.status = falcon.HTTP_204
