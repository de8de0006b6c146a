"""Document store port (interface).

Minimal contract of the remote document-oriented store used by the user
repository. Follows the Dependency Inversion Principle: domain defines the
port, infrastructure provides the implementation (in-memory, MongoDB).
"""

from typing import Any, Dict, List, Protocol


class IDocumentStore(Protocol):
    """
    Interface for a collection-based document store.

    Documents are plain dicts addressed by (collection, document_id).
    Implementations must translate driver failures into the
    ``domain.shared.errors`` taxonomy and let them propagate.

    Example usage (infrastructure layer):
        >>> store = InMemoryDocumentStore()
        >>> await store.create_document("users", "u1", {"email": "a@x.com"})
        >>> await store.query_by_field("users", "email", "a@x.com")
        [{'id': 'u1', 'email': 'a@x.com'}]
    """

    async def query_by_field(
        self,
        collection: str,
        field_name: str,
        value: Any,
    ) -> List[Dict[str, Any]]:
        """
        Find documents whose ``field_name`` equals ``value``.

        Args:
            collection: Collection name
            field_name: Field to match on
            value: Value the field must equal

        Returns:
            Matching documents in the store's natural order. Each document
            carries its identifier under the ``id`` key. Empty list when
            nothing matches.

        Note:
            The pseudo-field ``id`` matches the document identifier.

        Raises:
            StoreUnavailable: Store cannot be reached
            StoreError: Any other store failure
        """
        ...

    async def update_fields(
        self,
        collection: str,
        document_id: str,
        fields: Dict[str, Any],
    ) -> None:
        """
        Set the given fields on an existing document.

        Fields not named in ``fields`` are left untouched.

        Raises:
            DocumentNotFoundError: Document does not exist
            StoreUnavailable: Store cannot be reached
            StoreError: Any other store failure
        """
        ...

    async def create_document(
        self,
        collection: str,
        document_id: str,
        fields: Dict[str, Any],
    ) -> None:
        """
        Create a new document (create-only, never overwrites).

        Raises:
            DocumentAlreadyExistsError: A document with this id (or a
                unique field value) already exists
            StoreUnavailable: Store cannot be reached
            StoreError: Any other store failure
        """
        ...
