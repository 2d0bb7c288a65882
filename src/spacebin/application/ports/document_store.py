"""Document store port.

Every backend implements the same create/get semantics; ``migrate`` prepares
durable storage before the service starts serving and ``close`` releases the
backend during shutdown. Operations accept an optional ``timeout`` in seconds
so a slow backend cannot stall a request indefinitely.
"""

from typing import Protocol, runtime_checkable

from spacebin.domain.entities import Document


@runtime_checkable
class DocumentStore(Protocol):
    """Port for document persistence.

    Implementations: EphemeralDocumentStore (in-memory), PostgresDocumentStore.
    """

    async def create(
        self, content: str, extension: str | None, *, timeout: float | None = None
    ) -> Document:
        """Persist a new document under a freshly generated id.

        Raises PersistenceError when the write fails or id attempts run out.
        """
        ...

    async def get(self, document_id: str, *, timeout: float | None = None) -> Document:
        """Return the document. Raises NotFound if the id was never issued."""
        ...

    async def migrate(self, *, timeout: float | None = None) -> None:
        """Prepare storage structures. Safe to run repeatedly."""
        ...

    async def close(self, *, timeout: float | None = None) -> None:
        """Release backend resources. Later calls fail with PersistenceError."""
        ...
