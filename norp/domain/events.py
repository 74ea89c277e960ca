from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from pydantic import BaseModel, Field

from norp.domain.entities import LocationId


class DomainEvent(BaseModel, ABC):
    """
    An abstract base class for domain events.
    Represents something significant that has happened in the world.
    """
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    @abstractmethod
    def name(self) -> str:
        """A unique, machine-readable name for the event."""
        pass


class PlayerMoved(DomainEvent):
    """Event triggered when the current location changes."""
    from_location_id: LocationId
    to_location_id: LocationId

    @property
    def name(self) -> str:
        return "player.moved"


class LocationAdded(DomainEvent):
    """Event triggered when a new location is inserted into the world."""
    location_id: LocationId
    location_name: str

    @property
    def name(self) -> str:
        return "location.added"


class WorldSaved(DomainEvent):
    """Event triggered after the world has been written to its file."""
    path: Path
    location_count: int

    @property
    def name(self) -> str:
        return "world.saved"
