"""Document entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Document:
    """Stored paste. Immutable once created."""

    id: str
    content: str
    extension: str | None
    content_hash: str
    created_at: datetime
