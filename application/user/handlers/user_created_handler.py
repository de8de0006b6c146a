"""User created event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_created import UserCreated


logger = logging.getLogger(__name__)


@dataclass
class UserCreatedHandler:
    """Handler for UserCreated domain event.

    Triggered when a provider sign-in creates a new user.

    Examples:
        >>> handler = UserCreatedHandler()
        >>> await handler.handle(UserCreated.create(...))
    """

    async def handle(self, event: UserCreated) -> None:
        """Handle UserCreated event.

        Args:
            event: UserCreated domain event
        """
        logger.info(
            "User created",
            extra={
                "user_id": str(event.user_id),
                "apple_identifier": event.apple_identifier,
                "email_is_placeholder": event.email == event.apple_identifier,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )
