from typing import Dict, Type

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
from norp.domain.errors import EmptyInputError, UnrecognizedCommandError

DELIMITER = " "

KEYWORDS: Dict[str, Type[Command]] = {
    "move": MoveCommand,
    "add_location": AddLocationCommand,
    "look": LookCommand,
    "locations": ListLocationsCommand,
    "save": SaveCommand,
    "help": HelpCommand,
    "quit": QuitCommand,
    "exit": QuitCommand,
}


class CommandParser:
    """
    Turns one raw input line into a typed Command.

    Tokens are separated by exactly one space and repeated spaces are NOT
    collapsed: "move  <id>" yields args ["", "<id>"]. Keywords are case
    sensitive. Only a trailing line terminator is removed.
    """

    def parse(self, line: str) -> Command:
        tokens = line.rstrip("\r\n").split(DELIMITER)
        keyword, args = tokens[0], tokens[1:]
        if keyword == "":
            raise EmptyInputError()

        command_cls = KEYWORDS.get(keyword)
        if command_cls is None:
            raise UnrecognizedCommandError(keyword)
        return command_cls(args=args)
