"""Identifier generator port."""

from typing import Protocol


class IdGenerator(Protocol):
    """Port for producing new document identifiers."""

    def new_id(self) -> str: ...
