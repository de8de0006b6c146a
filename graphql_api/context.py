"""GraphQL context factory for dependency injection.

Provides the dependencies GraphQL resolvers need:
- User repository (read path)
- Sign-in orchestrator (write path, publishes domain events itself)
"""

from typing import Any
from strawberry.fastapi import BaseContext

from application.user.orchestrators.sign_in_orchestrator import SignInOrchestrator
from domain.user.core.ports.user_repository import IUserRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Injected into resolvers via the ``info`` parameter. Resolvers access
    dependencies using ``info.context.get("name")``.

    Attributes:
        user_repository: Repository for user lookups
        sign_in_orchestrator: Orchestrator for provider sign-in
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        sign_in_orchestrator: SignInOrchestrator,
    ) -> None:
        """Initialize GraphQL context with all dependencies."""
        super().__init__()
        self.user_repository = user_repository
        self.sign_in_orchestrator = sign_in_orchestrator

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Args:
            key: Dependency name (e.g., "user_repository")

        Returns:
            Dependency instance or None if not found
        """
        return getattr(self, key, None)


def create_context(
    user_repository: IUserRepository,
    sign_in_orchestrator: SignInOrchestrator,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> context = create_context(
        ...     user_repository=DocumentUserRepository(InMemoryDocumentStore()),
        ...     sign_in_orchestrator=orchestrator,
        ... )
    """
    return GraphQLContext(
        user_repository=user_repository,
        sign_in_orchestrator=sign_in_orchestrator,
    )
