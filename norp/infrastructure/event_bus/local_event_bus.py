from collections import defaultdict
from typing import Callable, Dict, List, Type

from norp.application.ports.event_bus import IEventBus
from norp.domain.events import DomainEvent

EventHandler = Callable[[DomainEvent], None]


class LocalEventBus(IEventBus):
    """
    A simple in-process implementation of the event bus.
    Handlers run synchronously, in subscription order, before publish returns.
    """
    _subscriptions: Dict[Type[DomainEvent], List[EventHandler]]

    def __init__(self):
        self._subscriptions = defaultdict(list)

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler):
        """Subscribes a handler to a specific event type."""
        self._subscriptions[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        # Subscribing to a parent type (e.g. DomainEvent) catches all of its subclasses.
        for subscribed_type, handlers in list(self._subscriptions.items()):
            if isinstance(event, subscribed_type):
                for handler in handlers:
                    handler(event)
