from abc import ABC, abstractmethod


class ILogger(ABC):
    """
    Abstract interface for the game's diagnostic log.
    Player-facing text never goes through here; it is printed by the run loop.
    """

    @abstractmethod
    def debug(self, message: str):
        """Logs parser and executor details."""
        pass

    @abstractmethod
    def info(self, message: str):
        """Logs state changes: moves, new locations, saves."""
        pass

    @abstractmethod
    def warning(self, message: str):
        """Logs recoverable command failures."""
        pass

    @abstractmethod
    def error(self, message: str):
        """Logs fatal failures just before the process exits."""
        pass
