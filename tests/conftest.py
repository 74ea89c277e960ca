import logging
import pytest
from pathlib import Path
from uuid import UUID

from norp.application.session import Session
from norp.domain.entities import Location
from norp.infrastructure.config.settings import Settings
from norp.infrastructure.logging.file_logger import LOGGER_NAME
from norp.infrastructure.repositories.in_memory_world_repository import InMemoryWorldRepository

# Chosen so that home sorts first and becomes the starting location.
HOME_ID = UUID("00000000-0000-4000-8000-000000000001")
CELLAR_ID = UUID("ffffffff-0000-4000-8000-000000000002")
WORLD_PATH = Path("world.json")


@pytest.fixture
def home():
    return Location(id=HOME_ID, name="Home", description="This is your home, it has some nice lighting")


@pytest.fixture
def cellar():
    return Location(id=CELLAR_ID, name="Cellar", description="Damp and dark.")


@pytest.fixture
def repo(home):
    """An in-memory repository holding a one-location world at WORLD_PATH."""
    repository = InMemoryWorldRepository()
    repository.save({home.id: home}, WORLD_PATH)
    return repository


@pytest.fixture
def settings():
    return Settings(locations_file=WORLD_PATH)


@pytest.fixture
def session(settings, repo):
    return Session(settings=settings, world_repository=repo)


@pytest.fixture(autouse=True)
def reset_file_logger():
    """FileLogger attaches its handler once per process; drop it between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, (logging.FileHandler, logging.NullHandler)):
            continue
        handler.close()
        logger.removeHandler(handler)
