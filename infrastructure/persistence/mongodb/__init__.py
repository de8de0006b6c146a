"""MongoDB persistence implementations."""

from .document_store import MongoDocumentStore

__all__ = [
    "MongoDocumentStore",
]
