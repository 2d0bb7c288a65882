"""Content hasher port."""

from typing import Protocol

from spacebin.domain.value_objects import ContentHash


class ContentHasher(Protocol):
    """Port for computing integrity digests of document content."""

    def hash(self, content: str) -> ContentHash: ...
