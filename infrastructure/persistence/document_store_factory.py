"""Document store factory for environment-based selection.

This factory creates the appropriate store implementation based on
the DOCUMENT_STORE environment variable:
- "inmemory": InMemoryDocumentStore (for testing and local runs)
- "mongodb": MongoDocumentStore (for production)

Default: inmemory
"""

from typing import Optional

from domain.shared.ports.document_store import IDocumentStore
from infrastructure.config import get_document_store_type
from infrastructure.persistence.in_memory.document_store import InMemoryDocumentStore


def create_document_store() -> IDocumentStore:
    """Create document store based on environment configuration.

    Returns:
        IDocumentStore: The configured store implementation

    Raises:
        ValueError: On unknown DOCUMENT_STORE value, or mongodb selected
            without MONGODB_URI

    Environment Variables:
        DOCUMENT_STORE: "inmemory" | "mongodb" (default: inmemory)
        MONGODB_URI: MongoDB connection string (required for mongodb)
        MONGODB_DATABASE: Database name (default: cardwizz)
    """
    store_type = get_document_store_type()

    if store_type == "mongodb":
        # Imported lazily so in-memory runs never touch the driver
        from infrastructure.persistence.mongodb.document_store import MongoDocumentStore

        return MongoDocumentStore()

    elif store_type == "inmemory":
        return InMemoryDocumentStore()

    else:
        raise ValueError(
            f"Invalid DOCUMENT_STORE value: {store_type}. " "Expected 'inmemory' or 'mongodb'"
        )


# Singleton instance
_document_store: Optional[IDocumentStore] = None


def get_document_store() -> IDocumentStore:
    """Get singleton document store instance.

    Returns:
        IDocumentStore: The singleton store
    """
    global _document_store

    if _document_store is None:
        _document_store = create_document_store()

    return _document_store


def reset_document_store() -> None:
    """Reset the singleton (for testing purposes)."""
    global _document_store
    _document_store = None
