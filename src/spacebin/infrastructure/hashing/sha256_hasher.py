"""SHA-256 content hasher."""

import hashlib

from spacebin.domain.value_objects import ContentHash


class Sha256ContentHasher:
    """Hashes the UTF-8 encoding of content with SHA-256."""

    def hash(self, content: str) -> ContentHash:
        """Return the hex digest of content."""
        return ContentHash(hashlib.sha256(content.encode("utf-8")).hexdigest())
