import pytest
from unittest.mock import Mock

from norp.application.commands.world import (
    AddLocationCommand,
    HelpCommand,
    ListLocationsCommand,
    LookCommand,
    MoveCommand,
    QuitCommand,
    SaveCommand,
)
from norp.application.use_cases.execute_command import CommandExecutor
from norp.domain.entities import DEFAULT_DESCRIPTION, Location
from norp.domain.errors import InvalidIdentifierError, LocationNotFoundError, MissingArgumentError
from norp.domain.events import LocationAdded, PlayerMoved, WorldSaved
from norp.infrastructure.event_bus.local_event_bus import LocalEventBus


@pytest.fixture
def event_bus():
    return Mock(spec=LocalEventBus)


@pytest.fixture
def executor(event_bus):
    return CommandExecutor(event_bus=event_bus)


def test_move_to_added_location(executor, session, event_bus, home):
    """
    Tests the happy path: a location added through the session can be moved to.
    Verifies the current location changes and an event is published.
    """
    # 1. ARRANGE
    second = Location.new("Second")
    session.add_location(second)

    # 2. ACT
    result = executor.execute(MoveCommand(args=[str(second.id)]), session)

    # 3. ASSERT
    assert session.current_location() == second
    assert result.message == second.render()
    event_bus.publish.assert_called_once()
    published_event = event_bus.publish.call_args[0][0]
    assert isinstance(published_event, PlayerMoved)
    assert published_event.from_location_id == home.id
    assert published_event.to_location_id == second.id


@pytest.mark.parametrize("text", [
    "not-a-uuid",
    "+" + "0" * 31,
    "\t" + "0" * 32,
    "0_" + "0" * 30,
    "0-0-0-0" + "0" * 28,
    "0" * 31,
    "123e4567-e89b-12d3-a456-42661417400g",
])
def test_move_with_invalid_id_leaves_location(executor, session, event_bus, home, text):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        executor.execute(MoveCommand(args=[text]), session)

    assert exc_info.value.text == text
    assert session.current_location() == home
    event_bus.publish.assert_not_called()


@pytest.mark.parametrize("spelling", [
    lambda u: str(u),
    lambda u: str(u).upper(),
    lambda u: u.hex,
    lambda u: "{" + str(u) + "}",
    lambda u: "urn:uuid:" + str(u),
], ids=["canonical", "upper", "hex", "braced", "urn"])
def test_move_accepts_every_standard_spelling(executor, session, spelling):
    second = Location.new("Second")
    session.add_location(second)

    executor.execute(MoveCommand(args=[spelling(second.id)]), session)

    assert session.current_location_id == second.id


@pytest.mark.parametrize("args", [[], [""], ["", "123e4567-e89b-12d3-a456-426614174000"]])
def test_move_without_destination(executor, session, args):
    with pytest.raises(MissingArgumentError):
        executor.execute(MoveCommand(args=args), session)


def test_move_to_unknown_location_propagates_not_found(executor, session, home):
    with pytest.raises(LocationNotFoundError):
        executor.execute(MoveCommand(args=["123e4567-e89b-12d3-a456-426614174000"]), session)

    assert session.current_location() == home


def test_add_location_with_description(executor, session, event_bus, home):
    result = executor.execute(AddLocationCommand(args=["Attic", "Dusty", "rafters."]), session)

    added = next(location for location in session.world.values() if location.name == "Attic")
    assert added.description == "Dusty rafters."
    assert str(added.id) in result.message
    # Adding never moves the player.
    assert session.current_location() == home
    published_event = event_bus.publish.call_args[0][0]
    assert isinstance(published_event, LocationAdded)
    assert published_event.location_id == added.id


def test_add_location_without_description_uses_placeholder(executor, session):
    executor.execute(AddLocationCommand(args=["Attic"]), session)

    added = next(location for location in session.world.values() if location.name == "Attic")
    assert added.description == DEFAULT_DESCRIPTION


@pytest.mark.parametrize("args", [[], [""]])
def test_add_location_without_name(executor, session, args):
    with pytest.raises(MissingArgumentError):
        executor.execute(AddLocationCommand(args=args), session)

    assert len(session.world) == 1


def test_add_location_does_not_save(executor, session, repo, settings):
    executor.execute(AddLocationCommand(args=["Attic"]), session)

    assert len(repo.load(settings.locations_file)) == 1


def test_save_writes_world_and_publishes(executor, session, repo, settings, event_bus):
    executor.execute(AddLocationCommand(args=["Attic"]), session)
    event_bus.reset_mock()

    result = executor.execute(SaveCommand(), session)

    assert len(repo.load(settings.locations_file)) == 2
    assert "2 location(s)" in result.message
    published_event = event_bus.publish.call_args[0][0]
    assert isinstance(published_event, WorldSaved)
    assert published_event.location_count == 2


def test_look_renders_current_location(executor, session, home):
    assert executor.execute(LookCommand(), session).message == home.render()


def test_locations_lists_ids_and_names(executor, session, home):
    result = executor.execute(ListLocationsCommand(), session)

    assert result.message == f"{home.id}  Home"


def test_help_and_quit(executor, session):
    assert "move <location id>" in executor.execute(HelpCommand(), session).message
    assert executor.execute(QuitCommand(), session).should_quit is True
