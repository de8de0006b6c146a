"""Document store error taxonomy.

Raised by store adapters only. Repositories, services and orchestrators
propagate them unchanged.
"""

from typing import Optional


class StoreError(Exception):
    """Base exception for any store-reported failure."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        collection: Optional[str] = None,
    ):
        """Initialize with failure context.

        Args:
            message: Human-readable failure description
            operation: Store operation that failed (e.g. "query_by_field")
            collection: Collection involved in the failure
        """
        self.message = message
        self.operation = operation
        self.collection = collection
        super().__init__(message)


class StoreUnavailable(StoreError):
    """Store cannot be reached (connectivity, timeout or auth failure)."""

    pass


class DocumentAlreadyExistsError(StoreError):
    """Create-only write conflicted with an existing document."""

    def __init__(self, collection: str, document_id: str):
        self.document_id = document_id
        super().__init__(
            f"Document already exists: {collection}/{document_id}",
            operation="create_document",
            collection=collection,
        )


class DocumentNotFoundError(StoreError):
    """Update targeted a document that does not exist."""

    def __init__(self, collection: str, document_id: str):
        self.document_id = document_id
        super().__init__(
            f"Document not found: {collection}/{document_id}",
            operation="update_fields",
            collection=collection,
        )
