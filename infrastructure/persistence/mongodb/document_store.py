"""MongoDB document store.

Implements the IDocumentStore port on top of motor:
- Connection management (motor pools connections automatically)
- Document id mapping (port ``id`` <-> MongoDB ``_id``)
- Error translation into the store error taxonomy
- Logging of failed operations
"""

from typing import Any, Dict, List, Optional
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import (
    ConnectionFailure,
    DuplicateKeyError,
    OperationFailure,
    PyMongoError,
)

from domain.shared.errors import (
    DocumentAlreadyExistsError,
    DocumentNotFoundError,
    StoreError,
    StoreUnavailable,
)
from infrastructure.config import (
    get_mongodb_database,
    get_mongodb_timeout_ms,
    get_mongodb_uri,
)

logger = logging.getLogger(__name__)

# Server error codes reported for bad credentials / missing privileges
_AUTH_ERROR_CODES = {13, 18}


class MongoDocumentStore:
    """
    MongoDB implementation of IDocumentStore.

    Each port document maps to a MongoDB document whose ``_id`` is the
    document id. ``find`` without sort returns natural order, which is the
    order query results are handed back in.

    Example:
        >>> store = MongoDocumentStore()  # reads MONGODB_URI
        >>> await store.create_document("users", "u1", {"email": "a@x.com"})
        >>> await store.query_by_field("users", "email", "a@x.com")
        [{'id': 'u1', 'email': 'a@x.com'}]
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        """
        Initialize store with optional client.

        Args:
            client: Motor client (if None, creates new one from config)

        Raises:
            ValueError: If no client is given and MONGODB_URI is not set
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI not configured. "
                    "Set MONGODB_URI, MONGODB_USER, "
                    "and MONGODB_PASSWORD environment variables."
                )
            self._client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(
                uri, serverSelectionTimeoutMS=get_mongodb_timeout_ms()
            )
        else:
            self._client = client

        database_name = get_mongodb_database()
        self._db = self._client[database_name]

        logger.info(
            "Initialized MongoDocumentStore",
            extra={"database": database_name},
        )

    @property
    def db(self) -> AsyncIOMotorDatabase[Dict[str, Any]]:
        """Get MongoDB database handle."""
        return self._db

    @staticmethod
    def _to_port(doc: Dict[str, Any]) -> Dict[str, Any]:
        """Convert a MongoDB document to a port document (``_id`` -> ``id``)."""
        fields = {k: v for k, v in doc.items() if k != "_id"}
        return {"id": str(doc["_id"]), **fields}

    @staticmethod
    def _translate(error: PyMongoError, operation: str, collection: str) -> StoreError:
        """Map a driver error onto the store error taxonomy."""
        if isinstance(error, ConnectionFailure):
            # Covers ServerSelectionTimeoutError, AutoReconnect, NetworkTimeout
            return StoreUnavailable(str(error), operation=operation, collection=collection)
        if isinstance(error, OperationFailure) and error.code in _AUTH_ERROR_CODES:
            return StoreUnavailable(str(error), operation=operation, collection=collection)
        return StoreError(str(error), operation=operation, collection=collection)

    async def query_by_field(
        self,
        collection: str,
        field_name: str,
        value: Any,
    ) -> List[Dict[str, Any]]:
        """
        Find documents by field equality.

        Returns:
            Port documents in natural order

        Raises:
            StoreUnavailable: Connectivity or auth failure
            StoreError: Any other MongoDB failure
        """
        try:
            mongo_field = "_id" if field_name == "id" else field_name
            cursor = self._db[collection].find({mongo_field: value})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(
                f"Error in query_by_field: collection={collection}, "
                f"field={field_name}, error={e}"
            )
            raise self._translate(e, "query_by_field", collection) from e

        return [self._to_port(doc) for doc in documents]

    async def update_fields(
        self,
        collection: str,
        document_id: str,
        fields: Dict[str, Any],
    ) -> None:
        """
        Set fields on an existing document with ``$set``.

        Raises:
            DocumentNotFoundError: No document with this id
            StoreUnavailable: Connectivity or auth failure
            StoreError: Any other MongoDB failure
        """
        try:
            result = await self._db[collection].update_one(
                {"_id": document_id}, {"$set": dict(fields)}
            )
        except PyMongoError as e:
            logger.error(
                f"Error in update_fields: collection={collection}, "
                f"document_id={document_id}, error={e}"
            )
            raise self._translate(e, "update_fields", collection) from e

        if result.matched_count == 0:
            raise DocumentNotFoundError(collection, document_id)

    async def create_document(
        self,
        collection: str,
        document_id: str,
        fields: Dict[str, Any],
    ) -> None:
        """
        Insert a new document (create-only).

        Raises:
            DocumentAlreadyExistsError: Duplicate ``_id`` or unique index value
            StoreUnavailable: Connectivity or auth failure
            StoreError: Any other MongoDB failure
        """
        try:
            await self._db[collection].insert_one({**fields, "_id": document_id})
        except DuplicateKeyError as e:
            logger.warning(
                "Duplicate document on create",
                extra={"collection": collection, "document_id": document_id},
            )
            raise DocumentAlreadyExistsError(collection, document_id) from e
        except PyMongoError as e:
            logger.error(
                f"Error in create_document: collection={collection}, "
                f"document_id={document_id}, error={e}"
            )
            raise self._translate(e, "create_document", collection) from e

    async def close(self) -> None:
        """Close MongoDB connection."""
        self._client.close()
        logger.info("Closed connection for MongoDocumentStore")
