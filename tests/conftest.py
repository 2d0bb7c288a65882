"""Pytest fixtures for Spacebin tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import pytest

from spacebin.infrastructure.hashing.sha256_hasher import Sha256ContentHasher
from spacebin.infrastructure.identifiers.random_id_generator import RandomIdGenerator
from spacebin.infrastructure.persistence.memory.document_store import (
    EphemeralDocumentStore,
)
from spacebin.infrastructure.persistence.postgres.document_store import (
    PostgresDocumentStore,
)

HELLO_WORLD_SHA256 = "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9"


# --- Fake id generator ---


class SequenceIdGenerator:
    """Hands out ids from a fixed sequence; records how many were drawn."""

    def __init__(self, ids: Iterable[str]) -> None:
        self._ids = list(ids)
        self.calls = 0

    def new_id(self) -> str:
        document_id = self._ids[min(self.calls, len(self._ids) - 1)]
        self.calls += 1
        return document_id


# --- Fake psycopg pool ---


class FakeCursor:
    def __init__(self, row: tuple | None) -> None:
        self._row = row

    async def fetchone(self) -> tuple | None:
        return self._row


class FakeConnection:
    """Understands the two statements PostgresDocumentStore issues."""

    def __init__(self, pool: FakePool) -> None:
        self._pool = pool

    async def execute(self, query: str, params: tuple = ()) -> FakeCursor:
        self._pool.queries.append(query)
        if self._pool.delay:
            await asyncio.sleep(self._pool.delay)
        if self._pool.fail is not None:
            raise self._pool.fail
        if query.startswith("INSERT"):
            document_id, content, extension, content_hash = params
            if document_id in self._pool.table:
                return FakeCursor(None)
            created_at = datetime.now(UTC)
            self._pool.table[document_id] = (
                document_id,
                content,
                extension,
                content_hash,
                created_at,
            )
            return FakeCursor((created_at,))
        if query.startswith("SELECT"):
            return FakeCursor(self._pool.table.get(params[0]))
        raise AssertionError(f"Unexpected query: {query}")


class FakePool:
    """In-memory stand-in for psycopg_pool.AsyncConnectionPool."""

    def __init__(self) -> None:
        self.table: dict[str, tuple] = {}
        self.queries: list[str] = []
        self.fail: Exception | None = None
        self.open_error: Exception | None = None
        self.delay = 0.0
        self.opened = False
        self.closed = False
        self.close_timeout: float | None = None
        self.in_use = 0
        self.borrowed = 0

    @asynccontextmanager
    async def connection(self, timeout: float | None = None) -> AsyncIterator[FakeConnection]:
        self.borrowed += 1
        self.in_use += 1
        try:
            yield FakeConnection(self)
        finally:
            self.in_use -= 1

    async def open(self, wait: bool = False, timeout: float = 30.0) -> None:
        if self.open_error is not None:
            raise self.open_error
        self.opened = True

    async def close(self, timeout: float = 5.0) -> None:
        self.closed = True
        self.close_timeout = timeout


# --- Fixtures ---


@pytest.fixture
def hasher() -> Sha256ContentHasher:
    return Sha256ContentHasher()


@pytest.fixture
def ephemeral_store(hasher: Sha256ContentHasher) -> EphemeralDocumentStore:
    """Fresh in-memory store with random ids."""
    return EphemeralDocumentStore(RandomIdGenerator(), hasher)


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def postgres_store(fake_pool: FakePool, hasher: Sha256ContentHasher) -> PostgresDocumentStore:
    """PostgresDocumentStore wired to the fake pool."""
    return PostgresDocumentStore(
        fake_pool,
        RandomIdGenerator(),
        hasher,
        database_url="postgresql://test@localhost/spacebin",
    )


@pytest.fixture(params=["ephemeral", "postgres"])
def any_store(request, ephemeral_store, postgres_store):
    """Each store variant in turn."""
    if request.param == "ephemeral":
        return ephemeral_store
    return postgres_store
