"""Repositories API resources."""

import asyncio

import falcon.asgi

from repogate.application.use_cases.repository.browse_repositories import (
    BrowseRepositoriesUseCase,
)
from repogate.application.use_cases.repository.get_repository import GetRepositoryUseCase
from repogate.domain.entities import Repository
from repogate.domain.exceptions import NotFound, PermissionDenied, SubjectResolutionError


def _repository_to_dict(repository: Repository) -> dict:
    return {
        "name": repository.name,
        "format": repository.format,
        "url": repository.url,
        "online": repository.online,
    }


class RepositoriesResource:
    """GET /v1/repositories - list repositories the caller may browse."""

    def __init__(self, browse_repositories: BrowseRepositoriesUseCase) -> None:
        self._browse = browse_repositories

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List browsable repositories, optionally filtered by ?format=."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        format = req.get_param("format") or None
        try:
            repositories = await asyncio.to_thread(self._browse.execute, user.user_id, format)
        except SubjectResolutionError:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        resp.media = {"items": [_repository_to_dict(r) for r in repositories]}
        resp.status = falcon.HTTP_200


class RepositoryResource:
    """GET /v1/repositories/{name} - single repository."""

    def __init__(self, get_repository: GetRepositoryUseCase) -> None:
        self._get = get_repository

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, name: str
    ) -> None:
        """Get repository by name."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            repository = await asyncio.to_thread(self._get.execute, user.user_id, name)
            resp.media = _repository_to_dict(repository)
            resp.status = falcon.HTTP_200
        except SubjectResolutionError:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Repository not found"}
