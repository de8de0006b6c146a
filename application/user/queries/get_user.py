"""Get user query."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class GetUserQuery:
    """Query to get user by identifier.

    Read-only operation that retrieves user from repository.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> user = await query.by_id(UserId("u1"))
        >>> user = await query.by_apple_identifier("apple-u1")
    """

    repository: IUserRepository

    async def by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by identifier.

        Args:
            user_id: User identifier

        Returns:
            User entity or None if not found
        """
        return await self.repository.find_by_id(user_id)

    async def by_apple_identifier(self, apple_identifier: str) -> Optional[User]:
        """Get user by provider identifier.

        Args:
            apple_identifier: Provider identifier

        Returns:
            User entity or None if not found
        """
        return await self.repository.find_by_apple_identifier(apple_identifier)
