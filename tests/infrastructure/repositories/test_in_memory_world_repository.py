from pathlib import Path

import pytest

from norp.domain.entities import Location
from norp.domain.errors import FileReadError
from norp.infrastructure.repositories.in_memory_world_repository import InMemoryWorldRepository


def test_load_returns_copies():
    repo = InMemoryWorldRepository()
    location = Location.new("Home")
    repo.save({location.id: location}, Path("w.json"))

    loaded = repo.load(Path("w.json"))
    loaded[location.id].name = "Changed"

    assert repo.load(Path("w.json"))[location.id].name == "Home"


def test_unknown_path_behaves_like_missing_file():
    repo = InMemoryWorldRepository()

    with pytest.raises(FileReadError):
        repo.load(Path("nowhere.json"))


def test_clear_forgets_everything():
    repo = InMemoryWorldRepository()
    repo.save({}, Path("w.json"))

    repo.clear()

    with pytest.raises(FileReadError):
        repo.load(Path("w.json"))
