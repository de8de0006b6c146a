"""UserCreated domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events import DomainEvent
from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserCreated(DomainEvent):
    """Domain event: User was created.

    Emitted when a sign-in matched no existing user and a new record was
    persisted.

    Attributes:
        user_id: Identifier of the new user
        email: Email stored on the new user
        apple_identifier: Provider identifier linked at creation

    Examples:
        >>> event = UserCreated.create(
        ...     user_id=UserId("u1"),
        ...     email="a@x.com",
        ...     apple_identifier="apple-u1",
        ... )
        >>> event.apple_identifier
        'apple-u1'
    """

    user_id: UserId
    email: str
    apple_identifier: str

    @classmethod
    def create(cls, user_id: UserId, email: str, apple_identifier: str) -> "UserCreated":
        """Create new UserCreated event with generated id and current timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            user_id=user_id,
            email=email,
            apple_identifier=apple_identifier,
        )
