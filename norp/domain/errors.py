from pathlib import Path
from typing import Optional
from uuid import UUID


class NorpError(Exception):
    """
    Base class for every error the game raises on purpose.

    `fatal` tells the run loop what to do with it: fatal errors end the
    process with a non-zero status, the rest are printed and the prompt
    comes back. Callers should branch on the class (or `fatal`), never on
    the message text.
    """
    fatal = True
    message = "Standard error encountered."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


# =====================================================================
# Configuration
# =====================================================================
class ConfigurationError(NorpError):
    message = "Failed to load configuration."

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        detail = f"Failed to load configuration file {path}."
        super().__init__(f"{detail} {reason}".strip())


# =====================================================================
# Persistence
# =====================================================================
class PersistenceError(NorpError):
    """The world file cannot be read or written; the saved state is unusable."""
    message = "Locations file error."

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        super().__init__()


class FileReadError(PersistenceError):
    message = "Failed to read locations file."


class FileWriteError(PersistenceError):
    message = "Failed to write locations file."


class FileDeserializeError(PersistenceError):
    message = "Failed to deserialize locations file."


class FileSerializeError(PersistenceError):
    message = "Failed to serialize locations."


# =====================================================================
# Session
# =====================================================================
class SessionError(NorpError):
    message = "Session error."


class EmptyWorldError(SessionError):
    message = "The locations file contains no locations to start from."


class DanglingReferenceError(SessionError):
    message = "Location reference no longer resolves."

    def __init__(self, location_id: UUID):
        self.location_id = location_id
        super().__init__(f"Failed to retrieve location {location_id} from the world.")


class LocationNotFoundError(SessionError):
    fatal = False
    message = "No such location."

    def __init__(self, location_id: UUID):
        self.location_id = location_id
        super().__init__(f"No location with id {location_id} exists.")


# =====================================================================
# Parsing
# =====================================================================
class ParseError(NorpError):
    fatal = False
    message = "Could not parse command."


class EmptyInputError(ParseError):
    message = "Command not provided."


class UnrecognizedCommandError(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f'Unrecognized command: "{token}".')


# =====================================================================
# Execution
# =====================================================================
class ExecutionError(NorpError):
    fatal = False
    message = "Could not execute command."


class MissingArgumentError(ExecutionError):
    def __init__(self, command: str, argument: str):
        self.command = command
        self.argument = argument
        super().__init__(f"No {argument} given for '{command}'.")


class InvalidIdentifierError(ExecutionError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f'"{text}" is not a valid location id.')
