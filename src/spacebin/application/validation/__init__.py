"""Request validation."""

from spacebin.application.validation.document_validator import DocumentValidator

__all__ = [
    "DocumentValidator",
]
