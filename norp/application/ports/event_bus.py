from abc import ABC, abstractmethod
from typing import Callable, Type

from norp.domain.events import DomainEvent


class IEventBus(ABC):
    """
    An interface (Port) for an event bus.
    It lets the command executor announce what happened without knowing
    who is listening (the log, for now).
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publishes a domain event to all subscribed handlers."""
        pass

    @abstractmethod
    def subscribe(self, event_type: Type[DomainEvent], handler: Callable[[DomainEvent], None]):
        """
        Subscribes a handler to a specific type of domain event.
        Subscribing to a base type also delivers its subclasses.
        """
        pass
