"""In-memory document store for testing and local runs."""

import copy
from typing import Any, Dict, List, Optional

from domain.shared.errors import DocumentAlreadyExistsError, DocumentNotFoundError


class InMemoryDocumentStore:
    """In-memory implementation of IDocumentStore.

    Collections are dicts keyed by document id. Dict insertion order is the
    store's natural order, so query results come back in creation order.
    Documents are deep-copied in and out: callers never share state with
    the store.

    Examples:
        >>> store = InMemoryDocumentStore()
        >>> await store.create_document("users", "u1", {"email": "a@x.com"})
        >>> await store.query_by_field("users", "email", "a@x.com")
        [{'id': 'u1', 'email': 'a@x.com'}]
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}

    async def query_by_field(
        self,
        collection: str,
        field_name: str,
        value: Any,
    ) -> List[Dict[str, Any]]:
        """Return documents whose field equals value, in insertion order."""
        documents = self._collections.get(collection, {})
        if field_name == "id":
            match = documents.get(value)
            return [] if match is None else [{"id": value, **copy.deepcopy(match)}]

        return [
            {"id": document_id, **copy.deepcopy(fields)}
            for document_id, fields in documents.items()
            if field_name in fields and fields[field_name] == value
        ]

    async def update_fields(
        self,
        collection: str,
        document_id: str,
        fields: Dict[str, Any],
    ) -> None:
        """Merge fields into an existing document.

        Raises:
            DocumentNotFoundError: If document doesn't exist
        """
        documents = self._collections.get(collection, {})
        if document_id not in documents:
            raise DocumentNotFoundError(collection, document_id)

        documents[document_id].update(copy.deepcopy(fields))

    async def create_document(
        self,
        collection: str,
        document_id: str,
        fields: Dict[str, Any],
    ) -> None:
        """Create a new document.

        Raises:
            DocumentAlreadyExistsError: If document id is taken
        """
        documents = self._collections.setdefault(collection, {})
        if document_id in documents:
            raise DocumentAlreadyExistsError(collection, document_id)

        documents[document_id] = copy.deepcopy(fields)

    def get(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """Get a raw document (testing utility)."""
        fields = self._collections.get(collection, {}).get(document_id)
        if fields is None:
            return None
        return {"id": document_id, **copy.deepcopy(fields)}

    def clear(self) -> None:
        """Clear all collections.

        Useful for test cleanup.
        """
        self._collections.clear()

    def count(self, collection: str) -> int:
        """Get number of documents in a collection."""
        return len(self._collections.get(collection, {}))
