"""Random identifier generator."""

import secrets
import string

DEFAULT_ALPHABET = string.ascii_letters + string.digits
URL_SAFE_CHARACTERS = frozenset(DEFAULT_ALPHABET + "-_")


class RandomIdGenerator:
    """Fixed-length random ids over a URL-safe alphabet (CSPRNG backed)."""

    def __init__(self, length: int = 8, alphabet: str = DEFAULT_ALPHABET) -> None:
        if length < 1:
            raise ValueError("id length must be positive")
        if len(set(alphabet)) < 2:
            raise ValueError("id alphabet needs at least two distinct characters")
        if not set(alphabet) <= URL_SAFE_CHARACTERS:
            raise ValueError("id alphabet must be URL-safe")
        self._length = length
        self._alphabet = alphabet

    def new_id(self) -> str:
        """Generate a new identifier."""
        return "".join(secrets.choice(self._alphabet) for _ in range(self._length))
