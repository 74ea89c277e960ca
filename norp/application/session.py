from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping

from norp.application.ports.world_repository import IWorldRepository
from norp.domain.entities import Location, LocationId, WorldGraph
from norp.domain.errors import DanglingReferenceError, EmptyWorldError, LocationNotFoundError
from norp.infrastructure.config.settings import Settings


def choose_starting_location(world: WorldGraph) -> LocationId:
    """
    Picks the location whose canonical id string sorts first.
    The file's key order is never consulted, so the choice is stable across
    saves and reloads.
    """
    if not world:
        raise EmptyWorldError()
    return min(world, key=str)


class Session:
    """
    The live state of one run: the world graph plus where the player is.

    `current_location_id` always names a key of the world graph; it is only
    ever reassigned through `set_current_location`, which checks first.
    """

    def __init__(self, settings: Settings, world_repository: IWorldRepository):
        self._settings = settings
        self._repo = world_repository
        self._world: WorldGraph = world_repository.load(settings.locations_file)
        self._current_location_id = choose_starting_location(self._world)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def world(self) -> Mapping[LocationId, Location]:
        """A read-only view of the world graph; mutate through add_location."""
        return MappingProxyType(self._world)

    @property
    def current_location_id(self) -> LocationId:
        return self._current_location_id

    def current_location(self) -> Location:
        location = self._world.get(self._current_location_id)
        if location is None:
            raise DanglingReferenceError(self._current_location_id)
        return location

    def location(self, location_id: LocationId) -> Location:
        location = self._world.get(location_id)
        if location is None:
            raise DanglingReferenceError(location_id)
        return location

    def locations(self) -> List[Location]:
        """All locations, sorted by name and then id."""
        return sorted(self._world.values(), key=lambda loc: (loc.name, str(loc.id)))

    def add_location(self, location: Location) -> None:
        self._repo.insert(self._world, location)

    def set_current_location(self, location_id: LocationId) -> None:
        if location_id not in self._world:
            raise LocationNotFoundError(location_id)
        self._current_location_id = location_id

    def save(self) -> Path:
        """Writes the whole world graph back to the configured file."""
        path = self._settings.locations_file
        self._repo.save(dict(self._world), path)
        return path
