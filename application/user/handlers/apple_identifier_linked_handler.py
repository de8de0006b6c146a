"""Apple identifier linked event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.apple_identifier_linked import AppleIdentifierLinked


logger = logging.getLogger(__name__)


@dataclass
class AppleIdentifierLinkedHandler:
    """Handler for AppleIdentifierLinked domain event.

    Triggered when an existing account (matched by email) is linked to a
    provider identifier on its first provider sign-in.
    """

    async def handle(self, event: AppleIdentifierLinked) -> None:
        """Handle AppleIdentifierLinked event.

        Args:
            event: AppleIdentifierLinked domain event
        """
        if event.previous_identifier:
            # Same email, different provider identity: previous link is replaced
            logger.warning(
                "Provider identifier replaced on existing user",
                extra={
                    "user_id": str(event.user_id),
                    "previous_identifier": event.previous_identifier,
                    "apple_identifier": event.apple_identifier,
                },
            )
            return

        logger.info(
            "Provider identifier linked",
            extra={
                "user_id": str(event.user_id),
                "apple_identifier": event.apple_identifier,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )
