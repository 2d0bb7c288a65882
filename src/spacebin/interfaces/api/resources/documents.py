"""Document API resources.

Every response uses the envelope ``{"status", "payload", "error"}``.
"""

import logging

import falcon
import falcon.asgi

from spacebin.application.dto.document_dto import DocumentCreateInput, DocumentOutput
from spacebin.application.use_cases.document.create_document import CreateDocumentUseCase
from spacebin.application.use_cases.document.get_document import GetDocumentUseCase
from spacebin.domain.exceptions import NotFound, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def _respond(
    resp: falcon.asgi.Response,
    status: str,
    payload: dict | None = None,
    error: str = "",
) -> None:
    resp.status = status
    resp.media = {
        "status": falcon.http_status_to_code(status),
        "payload": payload or {},
        "error": error,
    }


def _parse_create_body(body: object) -> DocumentCreateInput:
    """Turn a decoded request body into create input. Raises ValidationError."""
    if not isinstance(body, dict):
        raise ValidationError("request body must be an object")
    content = body.get("content")
    if not isinstance(content, str):
        raise ValidationError("content is required and must be a string")
    extension = body.get("extension")
    if extension is not None and not isinstance(extension, str):
        raise ValidationError("extension must be a string")
    return DocumentCreateInput(content=content, extension=extension or None)


class DocumentsResource:
    """POST / - create document."""

    def __init__(self, create_document: CreateDocumentUseCase) -> None:
        self._create_document = create_document

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create document from JSON or form body."""
        try:
            body = await req.get_media()
        except falcon.HTTPBadRequest as e:
            _respond(resp, falcon.HTTP_400, error=e.description or e.title)
            return

        try:
            input_data = _parse_create_body(body)
            result = await self._create_document.execute(input_data)
        except ValidationError as e:
            logger.debug("Rejected document: %s", e)
            _respond(resp, falcon.HTTP_400, error=str(e))
            return
        except PersistenceError as e:
            logger.error("Could not create document: %s", e)
            _respond(resp, falcon.HTTP_500, error=str(e))
            return

        _respond(
            resp,
            falcon.HTTP_201,
            payload={"id": result.id, "contentHash": result.content_hash},
        )


class DocumentResource:
    """GET /{id} and GET /{id}/raw - retrieve document."""

    def __init__(self, get_document: GetDocumentUseCase) -> None:
        self._get_document = get_document

    async def _load(
        self, resp: falcon.asgi.Response, document_id: str
    ) -> DocumentOutput | None:
        try:
            return await self._get_document.execute(document_id)
        except NotFound:
            _respond(resp, falcon.HTTP_404, error="Document not found")
        except PersistenceError as e:
            logger.error("Could not load document %s: %s", document_id, e)
            _respond(resp, falcon.HTTP_500, error=str(e))
        return None

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Get document by id."""
        document = await self._load(resp, document_id)
        if document is not None:
            _respond(resp, falcon.HTTP_200, payload=_document_to_dict(document))

    async def on_get_raw(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
    ) -> None:
        """Get document content as plain text."""
        document = await self._load(resp, document_id)
        if document is not None:
            resp.status = falcon.HTTP_200
            resp.content_type = "text/plain; charset=utf-8"
            resp.text = document.content


def _document_to_dict(d: DocumentOutput) -> dict:
    return {
        "id": d.id,
        "content": d.content,
        "extension": d.extension,
        "contentHash": d.content_hash,
        "createdAt": d.created_at.isoformat(),
    }
