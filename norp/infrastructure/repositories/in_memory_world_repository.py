from pathlib import Path
from typing import Dict

from norp.application.ports.world_repository import IWorldRepository
from norp.domain.entities import WorldGraph
from norp.domain.errors import FileReadError


class InMemoryWorldRepository(IWorldRepository):
    """
    An in-memory implementation of the IWorldRepository.
    It keeps one world graph per path in a simple dictionary.
    Useful for testing and development without touching the disk.
    """
    _worlds: Dict[Path, WorldGraph]

    def __init__(self):
        self._worlds = {}

    def load(self, path: Path) -> WorldGraph:
        """
        Returns a copy of the stored graph so callers cannot mutate it in place.
        A path that was never saved behaves like a missing file.
        """
        world = self._worlds.get(Path(path))
        if world is None:
            raise FileReadError(Path(path))
        return {location_id: location.model_copy(deep=True) for location_id, location in world.items()}

    def save(self, world: WorldGraph, path: Path) -> None:
        self._worlds[Path(path)] = {
            location_id: location.model_copy(deep=True) for location_id, location in world.items()
        }

    def clear(self) -> None:
        """A helper method for tests to clear the repository state."""
        self._worlds = {}
