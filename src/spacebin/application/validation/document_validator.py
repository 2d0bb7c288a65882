"""Create request validator."""

import re

from spacebin.application.dto.document_dto import DocumentCreateInput
from spacebin.application.dto.validation_config import ValidationConfig
from spacebin.domain.exceptions import ValidationError

_PATH_SEPARATORS = ("/", "\\")


def _utf8_size(value: str, field: str) -> int:
    """Encoded size of value; lone surrogates cannot be stored."""
    try:
        return len(value.encode("utf-8"))
    except UnicodeEncodeError as e:
        raise ValidationError(f"{field} must be valid UTF-8") from e


class DocumentValidator:
    """Rejects create requests that must never reach a store.

    Content is measured in UTF-8 bytes and may not contain NUL, which
    PostgreSQL text columns refuse. Extensions are always checked for path
    safety and length; the charset pattern applies only in strict mode.
    """

    def __init__(self, config: ValidationConfig) -> None:
        self._config = config
        self._extension_re = re.compile(config.extension_pattern)

    def validate(self, candidate: DocumentCreateInput) -> None:
        """Raise ValidationError if the candidate is not acceptable."""
        if not isinstance(candidate.content, str):
            raise ValidationError("content must be a string")
        if not candidate.content:
            raise ValidationError("content must not be empty")

        size = _utf8_size(candidate.content, "content")
        if size > self._config.max_content_size:
            raise ValidationError(
                f"content is {size} bytes, maximum is {self._config.max_content_size}"
            )
        if "\x00" in candidate.content:
            raise ValidationError("content must not contain NUL characters")

        if candidate.extension is not None:
            self._validate_extension(candidate.extension)

    def _validate_extension(self, extension: str) -> None:
        if not isinstance(extension, str):
            raise ValidationError("extension must be a string")
        if not extension:
            raise ValidationError("extension must not be empty")
        _utf8_size(extension, "extension")
        if len(extension) > self._config.max_extension_length:
            raise ValidationError(
                f"extension is longer than {self._config.max_extension_length} characters"
            )
        if any(sep in extension for sep in _PATH_SEPARATORS) or ".." in extension:
            raise ValidationError("extension must not contain path separators")
        if "\x00" in extension:
            raise ValidationError("extension must not contain NUL characters")
        if self._config.strict_extensions and not self._extension_re.match(extension):
            raise ValidationError(f"extension {extension!r} contains invalid characters")
