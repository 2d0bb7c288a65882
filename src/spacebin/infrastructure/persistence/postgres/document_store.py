"""PostgreSQL document store implementation."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from alembic.util.exc import CommandError
from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool, PoolTimeout
from sqlalchemy.exc import SQLAlchemyError

from spacebin.application.ports import ContentHasher, IdGenerator
from spacebin.domain.entities import Document
from spacebin.domain.exceptions import CollisionError, NotFound, PersistenceError
from spacebin.infrastructure.persistence.postgres.migrator import run_migrations
from spacebin.infrastructure.persistence.retry import insert_with_new_id

logger = logging.getLogger(__name__)

_INSERT = (
    "INSERT INTO document (id, content, extension, content_hash, created_at) "
    "VALUES (%s, %s, %s, %s, NOW()) "
    "ON CONFLICT (id) DO NOTHING RETURNING created_at"
)
_SELECT = (
    "SELECT id, content, extension, content_hash, created_at "
    "FROM document WHERE id = %s"
)


class PostgresDocumentStore:
    """Document store backed by a PostgreSQL table.

    Each operation borrows one pooled connection for its own duration; the
    pool commits on clean exit and rolls back on error.
    """

    def __init__(
        self,
        pool: AsyncConnectionPool,
        id_generator: IdGenerator,
        hasher: ContentHasher,
        *,
        database_url: str,
        max_id_attempts: int = 5,
        acquire_timeout: float = 30.0,
        close_timeout: float = 5.0,
    ) -> None:
        self._pool = pool
        self._id_generator = id_generator
        self._hasher = hasher
        self._database_url = database_url
        self._max_id_attempts = max_id_attempts
        self._acquire_timeout = acquire_timeout
        self._close_timeout = close_timeout
        self._closed = False

    @asynccontextmanager
    async def _connection(self, timeout: float | None) -> AsyncIterator[AsyncConnection]:
        """Borrow a connection; backend errors surface as PersistenceError."""
        self._check_open()
        acquire = timeout if timeout is not None else self._acquire_timeout
        try:
            async with self._pool.connection(timeout=acquire) as conn:
                yield conn
        except (psycopg.Error, PoolTimeout) as e:
            raise PersistenceError(f"Database operation failed: {e}") from e

    async def create(
        self, content: str, extension: str | None, *, timeout: float | None = None
    ) -> Document:
        """Insert document under a fresh id, retrying on id collisions."""
        content_hash = self._hasher.hash(content).value

        async def insert(document_id: str) -> Document:
            async with self._connection(timeout) as conn:
                cur = await conn.execute(
                    _INSERT, (document_id, content, extension, content_hash)
                )
                r = await cur.fetchone()
            if not r:
                raise CollisionError(document_id)
            return Document(
                id=document_id,
                content=content,
                extension=extension,
                content_hash=content_hash,
                created_at=r[0],
            )

        try:
            async with asyncio.timeout(timeout):
                return await insert_with_new_id(
                    insert, self._id_generator, self._max_id_attempts
                )
        except TimeoutError as e:
            raise PersistenceError(f"Create timed out after {timeout}s") from e

    async def get(self, document_id: str, *, timeout: float | None = None) -> Document:
        """Get document by id."""
        try:
            async with asyncio.timeout(timeout):
                async with self._connection(timeout) as conn:
                    cur = await conn.execute(_SELECT, (document_id,))
                    r = await cur.fetchone()
        except TimeoutError as e:
            raise PersistenceError(f"Get timed out after {timeout}s") from e
        if not r:
            raise NotFound("Document", document_id)
        return Document(
            id=r[0],
            content=r[1],
            extension=r[2],
            content_hash=r[3],
            created_at=r[4],
        )

    async def migrate(self, *, timeout: float | None = None) -> None:
        """Open the pool and bring the schema up to date.

        Must succeed before the service starts serving. ``timeout`` bounds the
        whole operation, pool warm-up and schema upgrade together.
        """
        self._check_open()
        wait = timeout if timeout is not None else self._acquire_timeout
        try:
            async with asyncio.timeout(timeout):
                await self._pool.open(wait=True, timeout=wait)
                await asyncio.to_thread(run_migrations, self._database_url)
        except TimeoutError as e:
            raise PersistenceError(f"Migration timed out after {timeout}s") from e
        except (psycopg.Error, PoolTimeout, SQLAlchemyError, CommandError) as e:
            raise PersistenceError(f"Could not migrate document table: {e}") from e
        logger.info("Document schema is up to date")

    async def close(self, *, timeout: float | None = None) -> None:
        """Close the pool, waiting up to ``timeout`` for borrowed connections."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._pool.close(
                timeout=timeout if timeout is not None else self._close_timeout
            )
        except psycopg.Error as e:
            raise PersistenceError(f"Failed closing database pool: {e}") from e
        logger.info("Database pool closed")

    def _check_open(self) -> None:
        if self._closed:
            raise PersistenceError("Document store is closed")
