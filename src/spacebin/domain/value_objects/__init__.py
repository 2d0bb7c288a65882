"""Domain value objects."""

from spacebin.domain.value_objects.content_hash import ContentHash

__all__ = [
    "ContentHash",
]
