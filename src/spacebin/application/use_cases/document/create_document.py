"""Create document use case."""

import logging

from spacebin.application.dto.document_dto import DocumentCreated, DocumentCreateInput
from spacebin.application.ports import DocumentStore
from spacebin.application.validation import DocumentValidator

logger = logging.getLogger(__name__)


class CreateDocumentUseCase:
    """Validate a paste, then hand it to the store."""

    def __init__(
        self,
        document_store: DocumentStore,
        validator: DocumentValidator,
        default_extension: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._store = document_store
        self._validator = validator
        self._default_extension = default_extension
        self._timeout = timeout

    async def execute(self, input_data: DocumentCreateInput) -> DocumentCreated:
        """Create document. Raises ValidationError before touching the store."""
        self._validator.validate(input_data)

        extension = input_data.extension or self._default_extension
        document = await self._store.create(
            input_data.content, extension, timeout=self._timeout
        )
        logger.debug("Created document %s (%s)", document.id, extension)
        return DocumentCreated(id=document.id, content_hash=document.content_hash)
