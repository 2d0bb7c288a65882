"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from spacebin.application.dto.validation_config import ValidationConfig
from spacebin.application.use_cases.document.create_document import CreateDocumentUseCase
from spacebin.application.use_cases.document.get_document import GetDocumentUseCase
from spacebin.application.validation import DocumentValidator
from spacebin.domain.exceptions import PersistenceError
from spacebin.interfaces.api.app import create_app
from spacebin.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from spacebin.interfaces.api.resources.health import HealthResource


class BrokenDocumentStore:
    """Store whose backend is down."""

    async def create(self, content, extension, *, timeout=None):
        raise PersistenceError("database unavailable")

    async def get(self, document_id, *, timeout=None):
        raise PersistenceError("database unavailable")

    async def migrate(self, *, timeout=None):
        raise PersistenceError("database unavailable")

    async def close(self, *, timeout=None):
        pass


def _build_app(store):
    create_document = CreateDocumentUseCase(
        document_store=store,
        validator=DocumentValidator(ValidationConfig(max_content_size=64)),
        default_extension="txt",
    )
    get_document = GetDocumentUseCase(document_store=store)
    return create_app(
        documents_resource=DocumentsResource(create_document),
        document_resource=DocumentResource(get_document),
        health_resource=HealthResource(),
    )


@pytest.fixture
def app(ephemeral_store):
    """Falcon ASGI app over an in-memory store."""
    return _build_app(ephemeral_store)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def broken_client():
    """Test client whose store fails every operation."""
    return TestClient(_build_app(BrokenDocumentStore()))
