from unittest.mock import Mock
from uuid import uuid4

from norp.domain.events import DomainEvent, LocationAdded, PlayerMoved
from norp.infrastructure.event_bus.local_event_bus import LocalEventBus


def test_handler_receives_subscribed_type_only():
    bus = LocalEventBus()
    moved_handler = Mock()
    bus.subscribe(PlayerMoved, moved_handler)

    bus.publish(LocationAdded(location_id=uuid4(), location_name="Attic"))
    moved = PlayerMoved(from_location_id=uuid4(), to_location_id=uuid4())
    bus.publish(moved)

    moved_handler.assert_called_once_with(moved)


def test_base_type_subscription_catches_everything():
    bus = LocalEventBus()
    catch_all = Mock()
    bus.subscribe(DomainEvent, catch_all)

    bus.publish(LocationAdded(location_id=uuid4(), location_name="Attic"))
    bus.publish(PlayerMoved(from_location_id=uuid4(), to_location_id=uuid4()))

    assert catch_all.call_count == 2
    assert [call.args[0].name for call in catch_all.call_args_list] == ["location.added", "player.moved"]
