"""Factory for creating the configured document store."""

import logging

from spacebin.application.ports import DocumentStore
from spacebin.config import Settings
from spacebin.infrastructure.hashing.sha256_hasher import Sha256ContentHasher
from spacebin.infrastructure.identifiers.random_id_generator import RandomIdGenerator

logger = logging.getLogger(__name__)


def create_document_store(settings: Settings) -> DocumentStore:
    """Create a DocumentStore based on settings.db_driver.

    Backends are imported lazily so the ephemeral store does not require a
    database driver at import time.
    """
    id_generator = RandomIdGenerator(length=settings.id_length, alphabet=settings.id_alphabet)
    hasher = Sha256ContentHasher()

    if settings.db_driver == "postgres":
        from spacebin.infrastructure.persistence.postgres.connection import create_pool
        from spacebin.infrastructure.persistence.postgres.document_store import (
            PostgresDocumentStore,
        )

        pool = create_pool(
            settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            timeout=settings.operation_timeout,
        )
        logger.info("Using PostgreSQL document store")
        return PostgresDocumentStore(
            pool,
            id_generator,
            hasher,
            database_url=settings.database_url,
            max_id_attempts=settings.max_id_attempts,
            acquire_timeout=settings.operation_timeout,
            close_timeout=settings.shutdown_grace_period,
        )

    from spacebin.infrastructure.persistence.memory.document_store import (
        EphemeralDocumentStore,
    )

    logger.info("Using ephemeral document store")
    return EphemeralDocumentStore(
        id_generator, hasher, max_id_attempts=settings.max_id_attempts
    )
