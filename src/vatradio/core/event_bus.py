"""Event bus for synchronous state-change notification.

Registry mutations are announced through this bus. Every published event is
delivered immediately, in handler priority order, before ``publish`` returns,
so subscribers always observe complete snapshots.

Typical usage example:
    from vatradio.core.event_bus import EventBus, EventPriority
    from vatradio.radio.events import RadiosChangedEvent

    bus = EventBus()
    bus.subscribe(RadiosChangedEvent, redraw_radio_list, EventPriority.HIGH)
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventPriority(Enum):
    """Priority levels for event handlers.

    Handlers are executed in order from CRITICAL to LOW.
    """

    CRITICAL = auto()
    HIGH = auto()
    NORMAL = auto()
    LOW = auto()


@dataclass(frozen=True)
class Event:
    """Base class for all events.

    Attributes:
        timestamp: Unix timestamp when the event was created.
    """

    timestamp: float = field(default_factory=time.time)


class EventBus:
    """Central event bus for synchronous event dispatch.

    Handlers registered with the same priority run in subscription order.
    Subscribing the same handler twice for one event type has no effect.

    Examples:
        >>> bus = EventBus()
        >>> bus.subscribe(RadiosChangedEvent, lambda e: print(len(e.radios)))
        >>> bus.publish(RadiosChangedEvent(radios=()))
        0
    """

    def __init__(self) -> None:
        """Initialize an empty event bus."""
        self._handlers: dict[type[Event], list[tuple[Callable[[Any], None], EventPriority]]] = {}

    def subscribe(
        self,
        event_type: type[Event],
        handler: Callable[[Any], None],
        priority: EventPriority = EventPriority.NORMAL,
    ) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: The class of event to subscribe to.
            handler: Callable that accepts the event as its only parameter.
            priority: Priority level for this handler. Defaults to NORMAL.
        """
        handlers = self._handlers.setdefault(event_type, [])
        if any(h == handler for h, _ in handlers):
            return

        handlers.append((handler, priority))
        # sort() is stable, so equal priorities keep subscription order
        handlers.sort(key=lambda x: x[1].value)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Any], None]) -> None:
        """Unsubscribe a handler from an event type.

        Unknown handlers are ignored.

        Args:
            event_type: The event type to unsubscribe from.
            handler: The handler function to remove.
        """
        if event_type not in self._handlers:
            return

        self._handlers[event_type] = [
            (h, p) for h, p in self._handlers[event_type] if h != handler
        ]
        if not self._handlers[event_type]:
            del self._handlers[event_type]

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribers of its exact type.

        Handler exceptions propagate to the caller.

        Args:
            event: The event to publish.
        """
        # Copy so handlers may (un)subscribe while being dispatched
        for handler, _ in list(self._handlers.get(type(event), ())):
            handler(event)

    def clear(self) -> None:
        """Remove all event handlers."""
        self._handlers.clear()

    def get_subscriber_count(self, event_type: type[Event]) -> int:
        """Get the number of subscribers for an event type.

        Args:
            event_type: The event type to query.

        Returns:
            Number of handlers subscribed to this event type.
        """
        return len(self._handlers.get(event_type, []))
