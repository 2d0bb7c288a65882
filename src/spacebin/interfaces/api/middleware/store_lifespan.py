"""Store lifespan middleware - migrates on startup, closes on shutdown."""

import logging
from typing import Any

from spacebin.application.ports import DocumentStore
from spacebin.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class StoreLifespanMiddleware:
    """Middleware that prepares the document store before the server accepts traffic.

    A failing migration aborts ASGI startup, so the server never binds its port
    without a reachable, migrated backend.
    """

    def __init__(
        self,
        store: DocumentStore,
        migrate_timeout: float | None = None,
        shutdown_grace_period: float | None = None,
    ) -> None:
        self._store = store
        self._migrate_timeout = migrate_timeout
        self._shutdown_grace_period = shutdown_grace_period
        self._ready = False

    @property
    def ready(self) -> bool:
        """True between a successful startup and shutdown."""
        return self._ready

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Run migrations when ASGI server starts."""
        try:
            await self._store.migrate(timeout=self._migrate_timeout)
        except PersistenceError:
            logger.critical("Failed migrations; could not prepare document storage")
            raise
        self._ready = True
        logger.info("Document store ready")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close the store when ASGI server shuts down."""
        self._ready = False
        try:
            await self._store.close(timeout=self._shutdown_grace_period)
        except PersistenceError:
            logger.exception("Failed closing document store")
            raise
        logger.info("Document store closed")
