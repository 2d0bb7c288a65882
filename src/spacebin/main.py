"""Application entry point and composition root."""

import logging
import math

from spacebin import __version__
from spacebin.application.use_cases.document.create_document import CreateDocumentUseCase
from spacebin.application.use_cases.document.get_document import GetDocumentUseCase
from spacebin.application.validation import DocumentValidator
from spacebin.config import Settings, get_settings
from spacebin.infrastructure.persistence.factory import create_document_store
from spacebin.interfaces.api.app import create_app
from spacebin.interfaces.api.middleware.store_lifespan import StoreLifespanMiddleware
from spacebin.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from spacebin.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_spacebin_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    store = create_document_store(settings)

    create_document = CreateDocumentUseCase(
        document_store=store,
        validator=DocumentValidator(settings.validation_config()),
        default_extension=settings.default_extension,
        timeout=settings.operation_timeout,
    )
    get_document = GetDocumentUseCase(
        document_store=store,
        timeout=settings.operation_timeout,
    )

    lifespan = StoreLifespanMiddleware(
        store,
        migrate_timeout=settings.migrate_timeout,
        shutdown_grace_period=settings.shutdown_grace_period,
    )
    return create_app(
        documents_resource=DocumentsResource(create_document),
        document_resource=DocumentResource(get_document),
        health_resource=HealthResource(is_ready=lambda: lifespan.ready),
        middleware=[lifespan],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Spacebin v%s (%s backend)", __version__, settings.db_driver)

    app = create_spacebin_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=math.ceil(settings.shutdown_grace_period),
    )


if __name__ == "__main__":
    main()
