"""Event bus port.

The sign-in flow publishes UserCreated / AppleIdentifierLinked through this
contract; infrastructure decides how handlers are run.
"""

from typing import Protocol, Callable, Awaitable, Type, TypeVar

from domain.shared.events import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """
    Publish domain events to subscribed async handlers.

    Example:
        >>> bus.subscribe(UserCreated, UserCreatedHandler().handle)
        >>> await bus.publish(UserCreated.create(UserId("u1"), "a@x.com", "apple-u1"))
    """

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> None:
        """Register handler for exact event_type (no subclass dispatch)."""
        ...

    async def publish(self, event: TEvent) -> None:
        """
        Deliver event to every handler of its type.

        Handlers run one after another in registration order. A handler
        failure is logged and does not reach the publisher.
        """
        ...

    def unsubscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> bool:
        """Drop one registration of handler; False when it was not registered."""
        ...

    def clear(self) -> None:
        """Forget all registrations."""
        ...
