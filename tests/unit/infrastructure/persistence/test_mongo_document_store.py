"""Unit tests for MongoDocumentStore with a mocked motor client."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import (
    DuplicateKeyError,
    OperationFailure,
    ServerSelectionTimeoutError,
    WriteError,
)

from domain.shared.errors import (
    DocumentAlreadyExistsError,
    DocumentNotFoundError,
    StoreError,
    StoreUnavailable,
)
from infrastructure.persistence.mongodb.document_store import MongoDocumentStore


@pytest.fixture
def collection() -> MagicMock:
    """Mock motor collection."""
    collection = MagicMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))
    collection.insert_one = AsyncMock()
    return collection


@pytest.fixture
def client(collection: MagicMock) -> MagicMock:
    """Mock motor client whose databases return the mock collection."""
    db = MagicMock()
    db.__getitem__.return_value = collection
    client = MagicMock()
    client.__getitem__.return_value = db
    return client


@pytest.fixture
def store(client: MagicMock, monkeypatch) -> MongoDocumentStore:
    """Store bound to the mock client."""
    monkeypatch.delenv("MONGODB_DATABASE", raising=False)
    return MongoDocumentStore(client=client)


class TestInit:
    """Test construction."""

    def test_uses_configured_database(self, client, monkeypatch):
        monkeypatch.setenv("MONGODB_DATABASE", "cardwizz_test")

        MongoDocumentStore(client=client)

        client.__getitem__.assert_called_with("cardwizz_test")

    def test_missing_uri_raises(self, monkeypatch):
        monkeypatch.delenv("MONGODB_URI", raising=False)

        with pytest.raises(ValueError, match="MONGODB_URI not configured"):
            MongoDocumentStore()

    def test_creates_client_from_uri(self, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "mongodb://localhost:27017")
        monkeypatch.setenv("MONGODB_TIMEOUT_MS", "1500")
        motor_client = MagicMock()
        monkeypatch.setattr(
            "infrastructure.persistence.mongodb.document_store.AsyncIOMotorClient",
            motor_client,
        )

        MongoDocumentStore()

        motor_client.assert_called_once_with(
            "mongodb://localhost:27017", serverSelectionTimeoutMS=1500
        )


class TestQueryByField:
    """Test query_by_field."""

    @pytest.mark.asyncio
    async def test_maps_id_to_port_documents(self, store, collection):
        collection.find.return_value.to_list.return_value = [
            {"_id": "u1", "email": "a@x.com", "appleIdentifier": ""},
            {"_id": "u2", "email": "a@x.com"},
        ]

        results = await store.query_by_field("users", "email", "a@x.com")

        collection.find.assert_called_once_with({"email": "a@x.com"})
        assert results == [
            {"id": "u1", "email": "a@x.com", "appleIdentifier": ""},
            {"id": "u2", "email": "a@x.com"},
        ]

    @pytest.mark.asyncio
    async def test_id_pseudo_field_queries_underscore_id(self, store, collection):
        await store.query_by_field("users", "id", "u1")

        collection.find.assert_called_once_with({"_id": "u1"})

    @pytest.mark.asyncio
    async def test_connection_failure_becomes_unavailable(self, store, collection):
        collection.find.return_value.to_list.side_effect = ServerSelectionTimeoutError(
            "no servers"
        )

        with pytest.raises(StoreUnavailable) as exc_info:
            await store.query_by_field("users", "email", "a@x.com")

        assert exc_info.value.operation == "query_by_field"
        assert exc_info.value.collection == "users"

    @pytest.mark.asyncio
    async def test_auth_failure_becomes_unavailable(self, store, collection):
        collection.find.return_value.to_list.side_effect = OperationFailure(
            "Authentication failed", code=18
        )

        with pytest.raises(StoreUnavailable):
            await store.query_by_field("users", "email", "a@x.com")

    @pytest.mark.asyncio
    async def test_other_operation_failure_becomes_store_error(self, store, collection):
        collection.find.return_value.to_list.side_effect = OperationFailure(
            "bad query", code=2
        )

        with pytest.raises(StoreError) as exc_info:
            await store.query_by_field("users", "email", "a@x.com")

        assert not isinstance(exc_info.value, StoreUnavailable)


class TestUpdateFields:
    """Test update_fields."""

    @pytest.mark.asyncio
    async def test_sets_only_given_fields(self, store, collection):
        await store.update_fields("users", "u1", {"appleIdentifier": "apple-u1"})

        collection.update_one.assert_awaited_once_with(
            {"_id": "u1"}, {"$set": {"appleIdentifier": "apple-u1"}}
        )

    @pytest.mark.asyncio
    async def test_unmatched_update_raises_not_found(self, store, collection):
        collection.update_one.return_value = MagicMock(matched_count=0)

        with pytest.raises(DocumentNotFoundError):
            await store.update_fields("users", "ghost", {"appleIdentifier": "x"})

    @pytest.mark.asyncio
    async def test_write_error_becomes_store_error(self, store, collection):
        collection.update_one.side_effect = WriteError("rejected", code=121)

        with pytest.raises(StoreError) as exc_info:
            await store.update_fields("users", "u1", {"appleIdentifier": "x"})

        assert exc_info.value.operation == "update_fields"


class TestCreateDocument:
    """Test create_document."""

    @pytest.mark.asyncio
    async def test_inserts_with_underscore_id(self, store, collection):
        await store.create_document("users", "u1", {"email": "a@x.com", "appleIdentifier": "a1"})

        collection.insert_one.assert_awaited_once_with(
            {"email": "a@x.com", "appleIdentifier": "a1", "_id": "u1"}
        )

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_already_exists(self, store, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key", code=11000)

        with pytest.raises(DocumentAlreadyExistsError) as exc_info:
            await store.create_document("users", "u1", {"email": "a@x.com"})

        assert exc_info.value.document_id == "u1"

    @pytest.mark.asyncio
    async def test_connection_failure_becomes_unavailable(self, store, collection):
        collection.insert_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(StoreUnavailable):
            await store.create_document("users", "u1", {"email": "a@x.com"})


@pytest.mark.asyncio
async def test_close_closes_client(store, client):
    await store.close()

    client.close.assert_called_once()
