"""Validation rules DTO."""

from dataclasses import dataclass

DEFAULT_EXTENSION_PATTERN = r"^[A-Za-z0-9_+.-]+$"


@dataclass
class ValidationConfig:
    """Limits applied to create requests before they reach a store."""

    max_content_size: int = 400_000
    max_extension_length: int = 32
    strict_extensions: bool = True
    extension_pattern: str = DEFAULT_EXTENSION_PATTERN
