"""Health check endpoints."""

from collections.abc import Callable

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, is_ready: Callable[[], bool] | None = None) -> None:
        self._is_ready = is_ready

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health/ready - readiness (document store migrated and open)."""
        if self._is_ready is not None and not self._is_ready():
            resp.media = {"status": "starting"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
