from pydantic import BaseModel, Field
from typing import List


class Command(BaseModel):
    """
    A Command Data Transfer Object (DTO).
    It represents one parsed input line: the keyword picked the class,
    and every token after the keyword is kept, in order, in `args`.
    """
    args: List[str] = Field(default_factory=list)


class MoveCommand(Command):
    """Intent to make another location current: `move <location id>`."""


class AddLocationCommand(Command):
    """Intent to create a location: `add_location <name> [<description words>...]`."""


class LookCommand(Command):
    """Intent to see the current location again."""


class ListLocationsCommand(Command):
    """Intent to list every location with its id."""


class SaveCommand(Command):
    """Intent to write the world back to its file."""


class HelpCommand(Command):
    """Intent to show the command summary."""


class QuitCommand(Command):
    """Intent to end the run."""
