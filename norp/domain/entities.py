from pydantic import BaseModel, Field
from typing import Dict, Optional
from uuid import UUID, uuid4

# Identifiers are random 128-bit UUIDs; the world graph is keyed by them.
LocationId = UUID

DEFAULT_DESCRIPTION = "A new location."


class Location(BaseModel):
    """A single place in the world: a unique identifier plus descriptive text."""
    id: LocationId = Field(default_factory=uuid4, frozen=True)
    name: str = Field(min_length=1)
    description: str = DEFAULT_DESCRIPTION

    @classmethod
    def new(cls, name: str, description: Optional[str] = None) -> "Location":
        """
        Creates a location with a freshly generated identifier.
        Falls back to the placeholder description when none is given.
        """
        if description is None:
            return cls(name=name)
        return cls(name=name, description=description)

    def render(self) -> str:
        return f"<---{self.name}--->\n{self.description}"

    def print(self) -> None:
        print(self.render())

    def __str__(self) -> str:
        return self.render()


# The complete identifier -> Location mapping, persisted as one file.
WorldGraph = Dict[LocationId, Location]
