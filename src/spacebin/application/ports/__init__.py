"""Application ports - interfaces for external adapters."""

from spacebin.application.ports.content_hasher import ContentHasher
from spacebin.application.ports.document_store import DocumentStore
from spacebin.application.ports.id_generator import IdGenerator

__all__ = [
    "ContentHasher",
    "DocumentStore",
    "IdGenerator",
]
