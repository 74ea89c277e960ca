from abc import ABC, abstractmethod
from pathlib import Path

from norp.domain.entities import Location, WorldGraph


class IWorldRepository(ABC):
    """
    An interface (Port) for persisting and retrieving the world graph.
    This contract is defined by the application layer and implemented by
    the infrastructure layer.
    """

    @abstractmethod
    def load(self, path: Path) -> WorldGraph:
        """
        Reads the complete identifier -> Location mapping stored at `path`.
        Raises FileReadError or FileDeserializeError.
        """
        pass

    @abstractmethod
    def save(self, world: WorldGraph, path: Path) -> None:
        """
        Replaces whatever is stored at `path` with the given mapping.
        Raises FileSerializeError or FileWriteError.
        """
        pass

    def insert(self, world: WorldGraph, location: Location) -> None:
        """
        Adds `location` to an in-memory graph under its own id.
        A colliding id silently replaces the older entry.
        """
        world[location.id] = location
