"""Sign-in orchestrator.

Turns an identity-provider credential into a domain user.
"""

from typing import Optional
import logging

from application.user.services.identity_resolver import IdentityResolver
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User
from domain.user.core.value_objects.provider_credential import ProviderCredential

logger = logging.getLogger(__name__)


class SignInOrchestrator:
    """
    Orchestrate provider sign-in.

    Flow:
    1. Extract email (provider email, or the raw user string when withheld)
    2. Resolve via IdentityResolver with the provider identifier as both
       external id and reconciliation key
    3. Publish domain events collected on the user (if an event bus is set)

    No local state, no retries, no caching. Resolver errors propagate.

    Example:
        >>> orchestrator = SignInOrchestrator(resolver, event_bus)
        >>> user = await orchestrator.sign_in(
        ...     ProviderCredential("apple-u1", None, "apple-u1")
        ... )
        >>> user.email
        'apple-u1'
    """

    def __init__(
        self,
        resolver: IdentityResolver,
        event_bus: Optional[IEventBus] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            resolver: Identity resolver
            event_bus: Optional bus receiving UserCreated / AppleIdentifierLinked
        """
        self._resolver = resolver
        self._event_bus = event_bus

    async def sign_in(self, credential: ProviderCredential) -> User:
        """
        Sign in with a provider credential.

        Args:
            credential: Credential extracted from the provider response

        Returns:
            User returned by the resolver, unchanged

        Raises:
            StoreUnavailable: Store cannot be reached
            StoreError: Any other persistence failure
        """
        email = credential.resolved_email

        logger.info(
            "Orchestrating provider sign-in",
            extra={
                "provider_identifier": credential.provider_identifier,
                "email_shared": credential.has_email,
            },
        )

        user = await self._resolver.resolve(
            external_id=credential.provider_identifier,
            email=email,
            provider_identifier=credential.provider_identifier,
        )

        events = user.collect_events()
        if self._event_bus is not None:
            for event in events:
                await self._event_bus.publish(event)

        return user
