"""In-process event bus.

Backs IEventBus for tests and single-instance deployments: the sign-in
orchestrator publishes, the user event handlers subscribe at bootstrap.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Type, TypeVar

from domain.shared.events import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)
Handler = Callable[[Any], Awaitable[None]]


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", None) or getattr(handler, "__name__", repr(handler))


class InMemoryEventBus:
    """
    IEventBus kept in a dict of event type -> handler list.

    Not thread-safe; registrations live only as long as the process.
    Handlers are awaited sequentially so ordering is deterministic, and a
    failing handler is logged without stopping the ones after it.

    Example:
        >>> bus = InMemoryEventBus()
        >>> bus.subscribe(AppleIdentifierLinked, AppleIdentifierLinkedHandler().handle)
        >>> await bus.publish(user.collect_events()[0])
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Handler]] = {}

    def subscribe(self, event_type: Type[TEvent], handler: Callable[[TEvent], Awaitable[None]]) -> None:
        """Append handler; subscribing twice means it runs twice."""
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(
            "Handler subscribed",
            extra={"event_type": event_type.__name__, "handler": _handler_name(handler)},
        )

    async def publish(self, event: TEvent) -> None:
        """Await each handler registered for type(event)."""
        event_name = type(event).__name__
        # Snapshot: handlers may (un)subscribe while we iterate
        handlers = list(self._handlers.get(type(event), []))

        if not handlers:
            logger.debug("No handlers for event", extra={"event_type": event_name})
            return

        logger.info(
            "Publishing event",
            extra={
                "event_type": event_name,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event_name,
                        "event_id": str(event.event_id),
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    def unsubscribe(
        self, event_type: Type[TEvent], handler: Callable[[TEvent], Awaitable[None]]
    ) -> bool:
        """Remove the first registration of handler.

        Returns:
            False if handler was not subscribed to event_type
        """
        registered = self._handlers.get(event_type, [])
        if handler not in registered:
            return False

        registered.remove(handler)
        logger.debug(
            "Handler unsubscribed",
            extra={"event_type": event_type.__name__, "handler": _handler_name(handler)},
        )
        return True

    def clear(self) -> None:
        """Drop every subscription."""
        self._handlers.clear()

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        """Number of registrations for event_type."""
        return len(self._handlers.get(event_type, []))
