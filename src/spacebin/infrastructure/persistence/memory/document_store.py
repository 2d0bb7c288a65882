"""In-memory document store.

Dict-based storage behind a single lock. All data is lost when the process
exits.
"""

import threading
from datetime import UTC, datetime

from spacebin.application.ports import ContentHasher, IdGenerator
from spacebin.domain.entities import Document
from spacebin.domain.exceptions import CollisionError, NotFound, PersistenceError
from spacebin.infrastructure.persistence.retry import insert_with_new_id


class EphemeralDocumentStore:
    """Process-local document store."""

    def __init__(
        self,
        id_generator: IdGenerator,
        hasher: ContentHasher,
        *,
        max_id_attempts: int = 5,
    ) -> None:
        self._id_generator = id_generator
        self._hasher = hasher
        self._max_id_attempts = max_id_attempts
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()
        self._closed = False

    async def create(
        self, content: str, extension: str | None, *, timeout: float | None = None
    ) -> Document:
        """Store document in memory under a fresh id."""
        self._check_open()
        content_hash = self._hasher.hash(content).value

        async def insert(document_id: str) -> Document:
            document = Document(
                id=document_id,
                content=content,
                extension=extension,
                content_hash=content_hash,
                created_at=datetime.now(UTC),
            )
            with self._lock:
                if self._closed:
                    raise PersistenceError("Document store is closed")
                if document_id in self._documents:
                    raise CollisionError(document_id)
                self._documents[document_id] = document
            return document

        return await insert_with_new_id(insert, self._id_generator, self._max_id_attempts)

    async def get(self, document_id: str, *, timeout: float | None = None) -> Document:
        """Return stored document."""
        with self._lock:
            if self._closed:
                raise PersistenceError("Document store is closed")
            document = self._documents.get(document_id)
        if document is None:
            raise NotFound("Document", document_id)
        return document

    async def migrate(self, *, timeout: float | None = None) -> None:
        """Nothing to prepare for in-memory storage."""

    async def close(self, *, timeout: float | None = None) -> None:
        """Drop all documents and refuse further operations."""
        with self._lock:
            self._closed = True
            self._documents.clear()

    def _check_open(self) -> None:
        if self._closed:
            raise PersistenceError("Document store is closed")
