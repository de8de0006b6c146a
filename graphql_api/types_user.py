"""GraphQL types for User domain."""

from typing import Optional
import strawberry

from domain.user.core.entities.user import User
from domain.user.core.value_objects.provider_credential import ProviderCredential


@strawberry.type
class UserType:
    """User GraphQL type.

    Examples:
        mutation {
          user {
            signIn(credential: { providerIdentifier: "001.abc", rawUser: "001.abc" }) {
              userId
              email
              appleIdentifier
            }
          }
        }
    """

    @strawberry.field
    def user_id(self, root: User) -> str:
        """Stable user identifier."""
        return str(root.user_id)

    @strawberry.field
    def email(self, root: User) -> str:
        """Email, relay address, or provider placeholder."""
        return root.email

    @strawberry.field
    def apple_identifier(self, root: User) -> str:
        """Linked provider identifier ("" when not linked)."""
        return root.apple_identifier


@strawberry.input
class ProviderCredentialInput:
    """Input type for a provider sign-in credential.

    ``email`` is omitted by Apple on repeat sign-ins.
    """

    provider_identifier: str = strawberry.field(
        description="Provider's stable per-user identifier",
    )
    raw_user: str = strawberry.field(
        description="Provider's opaque user string",
    )
    email: Optional[str] = strawberry.field(
        default=None,
        description="Email shared by the provider, if any",
    )

    def to_domain(self) -> ProviderCredential:
        """Convert to domain value object.

        Raises:
            InvalidCredentialError: If identifier or raw user is blank
        """
        return ProviderCredential(
            provider_identifier=self.provider_identifier,
            email=self.email,
            raw_user=self.raw_user,
        )
