from norp.application.ports.event_bus import IEventBus
from norp.application.ports.logger import ILogger
from norp.domain.events import DomainEvent, LocationAdded, PlayerMoved, WorldSaved


class LoggingEventHandler:
    """
    An event handler that writes every domain event to the log.
    """
    def __init__(self, logger: ILogger):
        self._logger = logger

    def handle(self, event: DomainEvent):
        """Dispatches to a specific method based on event type."""
        if isinstance(event, PlayerMoved):
            self._logger.info(f"PLAYER MOVED: from {event.from_location_id} to {event.to_location_id}.")
        elif isinstance(event, LocationAdded):
            self._logger.info(f"LOCATION ADDED: '{event.location_name}' ({event.location_id}).")
        elif isinstance(event, WorldSaved):
            self._logger.info(f"WORLD SAVED: {event.location_count} location(s) written to {event.path}.")
        else:
            self._logger.debug(f"Received unknown event type: {type(event).__name__}")

    def subscribe(self, event_bus: IEventBus):
        """Subscribes the handler to all events on the event bus."""
        event_bus.subscribe(DomainEvent, self.handle)
