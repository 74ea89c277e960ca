import logging
from typing import Union

from norp.application.ports.logger import ILogger

LOGGER_NAME = "norp"


class FileLogger(ILogger):
    """A concrete implementation of ILogger that writes to a file."""

    def __init__(self, log_file: str = "norp.log", level: Union[int, str] = logging.INFO):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(level)
        # Diagnostics stay in the file; the terminal belongs to the player.
        self.logger.propagate = False

        # One file handler per process, however many times this class is instantiated.
        # Handlers of other kinds (e.g. test capture) do not count.
        if not any(isinstance(h, logging.FileHandler) for h in self.logger.handlers):
            handler = logging.FileHandler(log_file, mode='a', encoding='utf-8', delay=True)
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            self.logger.addHandler(handler)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)
