"""Document-store backed User Repository implementation."""

from typing import Any, Dict, List, Optional
import logging

from domain.shared.ports.document_store import IDocumentStore
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
EMAIL_FIELD = "email"
APPLE_IDENTIFIER_FIELD = "appleIdentifier"
ID_FIELD = "id"


class DocumentUserRepository(IUserRepository):
    """User repository on top of an IDocumentStore.

    Stores one document per user in the ``users`` collection:
    - document id: user_id
    - email: email or provider placeholder
    - appleIdentifier: provider identifier ("" when not linked)

    Store errors are not caught: they propagate to the caller verbatim.

    Examples:
        >>> repo = DocumentUserRepository(InMemoryDocumentStore())
        >>> await repo.create(User.create(UserId("u1"), "a@x.com", "apple-u1"))
        >>> found = await repo.find_by_apple_identifier("apple-u1")
    """

    def __init__(self, store: IDocumentStore) -> None:
        """Initialize repository with document store.

        Args:
            store: Document store adapter (in-memory or MongoDB)
        """
        self._store = store

    @property
    def store(self) -> IDocumentStore:
        """Underlying document store."""
        return self._store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by identifier."""
        documents = await self._store.query_by_field(USERS_COLLECTION, ID_FIELD, str(user_id))
        return self._first(documents, ID_FIELD, str(user_id))

    async def find_by_apple_identifier(self, apple_identifier: str) -> Optional[User]:
        """Find user by provider identifier.

        Args:
            apple_identifier: Provider identifier

        Returns:
            First matching user in store order, or None
        """
        documents = await self._store.query_by_field(
            USERS_COLLECTION, APPLE_IDENTIFIER_FIELD, apple_identifier
        )
        return self._first(documents, APPLE_IDENTIFIER_FIELD, apple_identifier)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email.

        Args:
            email: Email to match (exact match)

        Returns:
            First matching user in store order, or None
        """
        documents = await self._store.query_by_field(USERS_COLLECTION, EMAIL_FIELD, email)
        return self._first(documents, EMAIL_FIELD, email)

    async def update_apple_identifier(self, user_id: UserId, apple_identifier: str) -> None:
        """Write the provider identifier field only."""
        await self._store.update_fields(
            USERS_COLLECTION,
            str(user_id),
            {APPLE_IDENTIFIER_FIELD: apple_identifier},
        )

    async def create(self, user: User) -> None:
        """Create the user document (create-only)."""
        await self._store.create_document(USERS_COLLECTION, str(user.user_id), user.to_fields())

    def _first(
        self,
        documents: List[Dict[str, Any]],
        field_name: str,
        value: str,
    ) -> Optional[User]:
        """Pick the first document in store order and map it to a User."""
        if not documents:
            return None

        if len(documents) > 1 and field_name != EMAIL_FIELD:
            logger.warning(
                "Multiple users share a unique field, using first match",
                extra={
                    "field": field_name,
                    "value": value,
                    "match_count": len(documents),
                    "user_ids": [doc.get(ID_FIELD) for doc in documents],
                },
            )

        return User.from_document(documents[0])
