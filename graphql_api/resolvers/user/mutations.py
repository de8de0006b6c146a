"""User domain GraphQL mutations."""

from typing import cast
import strawberry
from strawberry.types import Info

from graphql_api.types_user import UserType, ProviderCredentialInput


@strawberry.type
class UserMutations:
    """User domain mutations.

    Examples:
        mutation {
          user {
            signIn(credential: {
              providerIdentifier: "001234.abcd.0912"
              rawUser: "001234.abcd.0912"
              email: "abc@privaterelay.appleid.com"
            }) {
              userId
              email
              appleIdentifier
            }
          }
        }
    """

    @strawberry.mutation
    async def sign_in(self, info: Info, credential: ProviderCredentialInput) -> UserType:
        """Sign in with an identity-provider credential.

        Finds the user by provider identifier, then by email (linking the
        identifier), and creates one when neither matches.

        Args:
            info: GraphQL context with sign_in_orchestrator
            credential: Provider credential

        Returns:
            Resolved user

        Raises:
            RuntimeError: If sign_in_orchestrator not in context
            InvalidCredentialError: If credential fields are blank
            StoreUnavailable: Store cannot be reached
            StoreError: Any other persistence failure
        """
        orchestrator = info.context.get("sign_in_orchestrator")
        if not orchestrator:
            raise RuntimeError("sign_in_orchestrator not found in context")

        user = await orchestrator.sign_in(credential.to_domain())

        return cast(UserType, user)
