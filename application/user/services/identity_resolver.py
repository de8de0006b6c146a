"""Identity resolver: find-or-create user by provider identity."""

import logging

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import InvalidCredentialError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class IdentityResolver:
    """
    Resolve identity-provider attributes to exactly one durable user.

    Lookup order (short-circuiting):
    1. By provider identifier: return the match unchanged, no write
    2. By email: link the provider identifier on the match (one field
       update), return the updated user
    3. Otherwise: create a user whose id is the external id (one create)

    At most one write per call. Store errors propagate untouched; an empty
    lookup is a branch outcome, not an error. Concurrent first sign-ins are
    not coordinated here: the store's create-only semantics reject the
    second create with DocumentAlreadyExistsError.

    Example:
        >>> resolver = IdentityResolver(DocumentUserRepository(store))
        >>> user = await resolver.resolve("u1", "a@x.com", "apple-u1")
        >>> user.apple_identifier
        'apple-u1'
    """

    def __init__(self, repository: IUserRepository):
        """
        Initialize resolver.

        Args:
            repository: User repository bound to a document store
        """
        self._repository = repository

    async def resolve(self, external_id: str, email: str, provider_identifier: str) -> User:
        """
        Resolve a sign-in to a user, creating one if needed.

        Args:
            external_id: Identifier to assign if a new user is created
            email: Email (or placeholder) used for the secondary match
            provider_identifier: Provider's stable per-user identifier

        Returns:
            Matched, linked or newly created User. Linked and created users
            carry the corresponding domain event.

        Raises:
            InvalidCredentialError: If provider_identifier is blank (no store call is made)
            StoreUnavailable: Store cannot be reached
            StoreError: Any other persistence failure
        """
        if not provider_identifier or not provider_identifier.strip():
            # "" means "not linked" in storage: it must never be a lookup key
            raise InvalidCredentialError("provider_identifier cannot be empty")

        user = await self._repository.find_by_apple_identifier(provider_identifier)
        if user is not None:
            logger.info(
                "Identity resolved by provider identifier",
                extra={"user_id": str(user.user_id), "path": "matched"},
            )
            return user

        user = await self._repository.find_by_email(email)
        if user is not None:
            await self._repository.update_apple_identifier(user.user_id, provider_identifier)
            user.link_apple_identifier(provider_identifier)
            logger.info(
                "Identity resolved by email, provider identifier linked",
                extra={"user_id": str(user.user_id), "path": "linked"},
            )
            return user

        user = User.create(UserId(external_id), email, provider_identifier)
        await self._repository.create(user)
        logger.info(
            "Identity resolved by creating user",
            extra={"user_id": str(user.user_id), "path": "created"},
        )
        return user
