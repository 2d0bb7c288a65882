"""Collision retry shared by document store backends."""

import logging
from collections.abc import Awaitable, Callable

from spacebin.application.ports import IdGenerator
from spacebin.domain.entities import Document
from spacebin.domain.exceptions import CollisionError, PersistenceError

logger = logging.getLogger(__name__)


async def insert_with_new_id(
    insert: Callable[[str], Awaitable[Document]],
    id_generator: IdGenerator,
    max_attempts: int,
) -> Document:
    """Call ``insert`` with fresh ids until one does not collide.

    ``insert`` raises CollisionError when the id is already taken. Running out
    of attempts is reported as PersistenceError.
    """
    for attempt in range(1, max_attempts + 1):
        document_id = id_generator.new_id()
        try:
            return await insert(document_id)
        except CollisionError:
            logger.warning(
                "Document id collision on %s (attempt %d/%d)", document_id, attempt, max_attempts
            )
    raise PersistenceError(f"Could not allocate a unique document id after {max_attempts} attempts")
