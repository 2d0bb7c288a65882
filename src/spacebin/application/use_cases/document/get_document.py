"""Get document use case."""

from spacebin.application.dto.document_dto import DocumentOutput
from spacebin.application.ports import DocumentStore


class GetDocumentUseCase:
    """Get document by id."""

    def __init__(self, document_store: DocumentStore, timeout: float | None = None) -> None:
        self._store = document_store
        self._timeout = timeout

    async def execute(self, document_id: str) -> DocumentOutput:
        """Get document by id. Raises NotFound for unknown ids."""
        document = await self._store.get(document_id, timeout=self._timeout)
        return DocumentOutput(
            id=document.id,
            content=document.content,
            extension=document.extension,
            content_hash=document.content_hash,
            created_at=document.created_at,
        )
