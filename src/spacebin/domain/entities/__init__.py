"""Domain entities."""

from spacebin.domain.entities.document import Document

__all__ = [
    "Document",
]
