"""Domain ports (interfaces for infrastructure adapters)."""

from domain.shared.ports.document_store import IDocumentStore
from domain.shared.ports.event_bus import IEventBus

__all__ = [
    "IDocumentStore",
    "IEventBus",
]
