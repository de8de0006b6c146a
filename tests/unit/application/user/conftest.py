"""Fixtures for user application tests."""

from typing import Any, Dict, List, Tuple

import pytest

from application.user.services.identity_resolver import IdentityResolver
from infrastructure.persistence.in_memory.document_store import InMemoryDocumentStore
from infrastructure.user.document_user_repository import DocumentUserRepository


class RecordingDocumentStore(InMemoryDocumentStore):
    """In-memory store that records every write it receives."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: List[Tuple[str, str, str, Dict[str, Any]]] = []

    async def update_fields(self, collection: str, document_id: str, fields: Dict[str, Any]) -> None:
        self.writes.append(("update", collection, document_id, dict(fields)))
        await super().update_fields(collection, document_id, fields)

    async def create_document(
        self, collection: str, document_id: str, fields: Dict[str, Any]
    ) -> None:
        self.writes.append(("create", collection, document_id, dict(fields)))
        await super().create_document(collection, document_id, fields)

    async def seed(self, document_id: str, fields: Dict[str, Any]) -> None:
        """Insert a user document without recording it as a write."""
        await InMemoryDocumentStore.create_document(self, "users", document_id, fields)


@pytest.fixture
def store() -> RecordingDocumentStore:
    """Create recording in-memory store."""
    return RecordingDocumentStore()


@pytest.fixture
def repository(store) -> DocumentUserRepository:
    """Create user repository on the recording store."""
    return DocumentUserRepository(store)


@pytest.fixture
def resolver(repository) -> IdentityResolver:
    """Create identity resolver."""
    return IdentityResolver(repository)
