"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations used by identity
    resolution. Store failures (StoreUnavailable, StoreError) propagate
    unchanged from every method.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by identifier.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_apple_identifier(self, apple_identifier: str) -> Optional[User]:
        """Find user by provider identifier.

        Args:
            apple_identifier: Provider identifier

        Returns:
            First matching user in store order, None if no match

        Note:
            This is the authoritative lookup. More than one match means the
            uniqueness invariant was broken upstream; the first record wins.
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email.

        Args:
            email: Email (or placeholder) to match

        Returns:
            First matching user in store order, None if no match
        """
        pass

    @abstractmethod
    async def update_apple_identifier(self, user_id: UserId, apple_identifier: str) -> None:
        """Persist a new provider identifier on an existing user.

        Exactly one write touching only the identifier field.

        Raises:
            DocumentNotFoundError: If the user document does not exist
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> None:
        """Persist a new user (create-only).

        Raises:
            DocumentAlreadyExistsError: If a user with the same id exists
        """
        pass
