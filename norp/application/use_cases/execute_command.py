import re
from uuid import UUID

from pydantic import BaseModel

from norp.application.commands.parser import DELIMITER
from norp.application.commands.world import (
    AddLocationCommand,
    Command,
    HelpCommand,
    ListLocationsCommand,
    LookCommand,
    MoveCommand,
    QuitCommand,
    SaveCommand,
)
from norp.application.ports.event_bus import IEventBus
from norp.application.session import Session
from norp.domain.entities import Location
from norp.domain.errors import InvalidIdentifierError, MissingArgumentError
from norp.domain.events import LocationAdded, PlayerMoved, WorldSaved

# Hyphenated, bare 32-digit hex, braced, or urn:uuid: spellings.
_HEX = "[0-9a-fA-F]"
_HYPHENATED = f"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
UUID_TEXT = re.compile(
    f"{_HYPHENATED}|{_HEX}{{32}}|\\{{{_HYPHENATED}\\}}|urn:uuid:{_HYPHENATED}"
)

HELP_TEXT = "\n".join([
    "  move <location id>                  - Go to another location.",
    "  add_location <name> [description]   - Create a new location.",
    "  look                                - Describe where you are.",
    "  locations                           - List every location and its id.",
    "  save                                - Write the world to its file.",
    "  help                                - Show this summary.",
    "  quit                                - Leave the game (does not save).",
])


class CommandResult(BaseModel):
    """What the run loop should show after a command, and whether to stop."""
    message: str = ""
    should_quit: bool = False


class CommandExecutor:
    """
    Applies a parsed Command to a Session.

    Each command performs at most its one intended change. Nothing is saved
    implicitly; persistence happens only through the `save` command.
    """
    def __init__(self, event_bus: IEventBus):
        self._bus = event_bus

    def execute(self, command: Command, session: Session) -> CommandResult:
        if isinstance(command, MoveCommand):
            return self._move(command, session)
        if isinstance(command, AddLocationCommand):
            return self._add_location(command, session)
        if isinstance(command, LookCommand):
            return CommandResult(message=session.current_location().render())
        if isinstance(command, ListLocationsCommand):
            lines = [f"{location.id}  {location.name}" for location in session.locations()]
            return CommandResult(message="\n".join(lines))
        if isinstance(command, SaveCommand):
            return self._save(session)
        if isinstance(command, HelpCommand):
            return CommandResult(message=HELP_TEXT)
        if isinstance(command, QuitCommand):
            return CommandResult(message="Goodbye!", should_quit=True)
        raise TypeError(f"Unsupported command type: {type(command).__name__}")

    def _move(self, command: MoveCommand, session: Session) -> CommandResult:
        """
        1. Requires a destination token.
        2. Accepts only standard UUID spellings (see UUID_TEXT).
        3. Lets the session validate and commit it.
        """
        if not command.args or command.args[0] == "":
            raise MissingArgumentError("move", "destination")

        text = command.args[0]
        if not UUID_TEXT.fullmatch(text):
            raise InvalidIdentifierError(text)
        target_id = UUID(text)

        from_id = session.current_location_id
        session.set_current_location(target_id)

        self._bus.publish(PlayerMoved(from_location_id=from_id, to_location_id=target_id))
        return CommandResult(message=session.current_location().render())

    def _add_location(self, command: AddLocationCommand, session: Session) -> CommandResult:
        if not command.args or command.args[0] == "":
            raise MissingArgumentError("add_location", "name")

        name = command.args[0]
        description = DELIMITER.join(command.args[1:]).strip() or None
        location = Location.new(name, description)
        session.add_location(location)

        self._bus.publish(LocationAdded(location_id=location.id, location_name=location.name))
        return CommandResult(message=f"Added '{location.name}' with id {location.id}.")

    def _save(self, session: Session) -> CommandResult:
        path = session.save()
        self._bus.publish(WorldSaved(path=path, location_count=len(session.world)))
        return CommandResult(message=f"Saved {len(session.world)} location(s) to {path}.")
