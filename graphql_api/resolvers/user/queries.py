"""User domain GraphQL queries."""

from typing import Optional, cast
import strawberry
from strawberry.types import Info

from graphql_api.types_user import UserType
from application.user.queries.get_user import GetUserQuery
from domain.user.core.value_objects.user_id import UserId


@strawberry.type
class UserQueries:
    """User domain queries.

    Examples:
        query {
          user {
            byId(userId: "001234.abcd.0912") {
              email
              appleIdentifier
            }
          }
        }
    """

    @strawberry.field
    async def by_id(self, info: Info, user_id: str) -> Optional[UserType]:
        """Get user by identifier.

        Returns:
            User or None if not found (or the id is blank)
        """
        if not user_id.strip():
            return None

        user_repository = info.context.get("user_repository")
        if not user_repository:
            raise RuntimeError("user_repository not found in context")

        query = GetUserQuery(repository=user_repository)
        user = await query.by_id(UserId(user_id))

        return cast(Optional[UserType], user)

    @strawberry.field
    async def by_apple_identifier(self, info: Info, apple_identifier: str) -> Optional[UserType]:
        """Get user by provider identifier.

        Returns:
            User or None if not found
        """
        user_repository = info.context.get("user_repository")
        if not user_repository:
            raise RuntimeError("user_repository not found in context")

        query = GetUserQuery(repository=user_repository)
        user = await query.by_apple_identifier(apple_identifier)

        return cast(Optional[UserType], user)
