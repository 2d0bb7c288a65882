"""Content hash for client-side integrity checks."""

import re
from dataclasses import dataclass

_HEX_SHA256 = re.compile(r"^[0-9a-f]{64}$")


@dataclass(frozen=True)
class ContentHash:
    """SHA-256 digest of document content (lowercase hex)."""

    value: str

    def __post_init__(self) -> None:
        if not _HEX_SHA256.match(self.value):
            raise ValueError("SHA-256 hash must be 64 lowercase hex characters")

    def __str__(self) -> str:
        return self.value
