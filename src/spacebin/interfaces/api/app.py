"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from spacebin.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from spacebin.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


async def _handle_unexpected(req, resp, ex, params) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"status": 500, "payload": {}, "error": "Internal Server Error"}


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_route("/health", health_resource)
    app.add_route("/health/ready", health_resource, suffix="ready")
    app.add_route("/", documents_resource)
    app.add_route("/{document_id}", document_resource)
    app.add_route("/{document_id}/raw", document_resource, suffix="raw")
    return app
