"""AppleIdentifierLinked domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events import DomainEvent
from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class AppleIdentifierLinked(DomainEvent):
    """Domain event: provider identifier attached to an existing user.

    Emitted when a user found by email signs in through the identity
    provider for the first time (e.g. an account created via password
    sign-up, later used with Sign in with Apple).

    Attributes:
        user_id: Identifier of the existing user
        previous_identifier: Identifier stored before the link ("" if none)
        apple_identifier: Newly linked provider identifier
    """

    user_id: UserId
    previous_identifier: str
    apple_identifier: str

    @classmethod
    def create(
        cls,
        user_id: UserId,
        previous_identifier: str,
        apple_identifier: str,
    ) -> "AppleIdentifierLinked":
        """Create new AppleIdentifierLinked event with generated id and current timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            previous_identifier=previous_identifier,
            apple_identifier=apple_identifier,
        )
