"""Document DTOs."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class DocumentCreateInput:
    """Input for creating a document."""

    content: str
    extension: str | None = None


@dataclass
class DocumentCreated:
    """Result of a successful create."""

    id: str
    content_hash: str


@dataclass
class DocumentOutput:
    """Output DTO for document."""

    id: str
    content: str
    extension: str | None
    content_hash: str
    created_at: datetime
