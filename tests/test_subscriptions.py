import pytest

from mcwss.event.registry import EventName
from mcwss.protocol import EventRequest, MessagePurpose
from mcwss.subscriptions import EventSubscriber

METHODS = [
    ("on_game_rules_loaded", EventName.GAME_RULES_LOADED),
    ("on_game_rules_updated", EventName.GAME_RULES_UPDATED),
    ("on_mob_born", EventName.MOB_BORN),
    ("on_mob_killed", EventName.MOB_KILLED),
    ("on_award_achievement", EventName.AWARD_ACHIEVEMENT),
    ("on_slash_command_executed", EventName.SLASH_COMMAND_EXECUTED),
    ("on_screen_changed", EventName.SCREEN_CHANGED),
    ("on_script_loaded", EventName.SCRIPT_LOADED),
    ("on_script_ran", EventName.SCRIPT_RAN),
    ("on_start_world", EventName.START_WORLD),
    ("on_world_loaded", EventName.WORLD_LOADED),
    ("on_mob_interacted", EventName.MOB_INTERACTED),
    ("on_end_of_day", EventName.END_OF_DAY),
    ("on_signed_book_opened", EventName.SIGNED_BOOK_OPENED),
    ("on_book_edited", EventName.BOOK_EDITED),
    ("on_teleported", EventName.PLAYER_TELEPORTED),
    ("on_transform", EventName.PLAYER_TRANSFORM),
    ("on_travelled", EventName.PLAYER_TRAVELLED),
    ("on_item_acquired", EventName.ITEM_ACQUIRED),
    ("on_item_dropped", EventName.ITEM_DROPPED),
    ("on_item_named", EventName.ITEM_NAMED),
    ("on_item_smelted", EventName.ITEM_SMELTED),
    ("on_item_used", EventName.ITEM_USED),
    ("on_item_interacted", EventName.ITEM_INTERACTED),
    ("on_item_equipped", EventName.ITEM_EQUIPPED),
    ("on_item_crafted", EventName.ITEM_CRAFTED),
    ("on_block_placed", EventName.BLOCK_PLACED),
    ("on_block_broken", EventName.BLOCK_BROKEN),
    ("on_player_message", EventName.PLAYER_MESSAGE),
    ("on_sign_in_to_xbox_live", EventName.SIGN_IN_TO_XBOX_LIVE),
    ("on_sign_out_of_xbox_live", EventName.SIGN_OUT_OF_XBOX_LIVE),
    ("on_vehicle_exited", EventName.VEHICLE_EXITED),
]


@pytest.fixture
def written():
    return []


@pytest.fixture
def subscriber(written):
    return EventSubscriber(written.append)


@pytest.mark.parametrize("method, event_name", METHODS)
def test_on_method_subscribes_and_registers(subscriber, written, method, event_name):
    received = []
    returned = getattr(subscriber, method)(received.append)
    assert returned == received.append
    assert len(written) == 1
    packet = written[0]
    assert packet.header.message_purpose == MessagePurpose.SUBSCRIBE
    assert packet.body == EventRequest(event_name=event_name)
    subscriber._handler_for(event_name)("payload")
    assert received == ["payload"]


def test_subscribe_packet_wire_form(subscriber, written):
    def handler(event):
        return None

    returned = subscriber.on_block_placed(handler)
    assert returned is handler
    assert subscriber._handler_for(EventName.BLOCK_PLACED) is handler
    document = written[0].to_dict()
    assert document["header"]["messagePurpose"] == "subscribe"
    assert document["body"] == {"eventName": "BlockPlaced"}
    assert document["header"]["version"] == 1


def test_handler_lookup_by_plain_string(subscriber):
    handler = subscriber.on_player_message(lambda event: None)
    assert subscriber._handler_for("PlayerMessage") is handler


def test_later_handler_replaces_earlier(subscriber):
    subscriber.on_item_used(lambda event: "first")
    subscriber.on_item_used(lambda event: "second")
    assert subscriber._handler_for(EventName.ITEM_USED)(None) == "second"
    assert subscriber._subscribed_events() == (EventName.ITEM_USED,)


def test_non_callable_handler_is_rejected(subscriber, written):
    with pytest.raises(TypeError):
        subscriber.on_block_broken("not a function")
    assert written == []
    assert subscriber._handler_for(EventName.BLOCK_BROKEN) is None


def test_unsubscribe_removes_handler_and_sends_packet(subscriber, written):
    subscriber.on_mob_born(lambda event: None)
    subscriber._unsubscribe(EventName.MOB_BORN)
    assert subscriber._handler_for(EventName.MOB_BORN) is None
    assert written[-1].header.message_purpose == MessagePurpose.UNSUBSCRIBE
    assert written[-1].body == EventRequest(event_name=EventName.MOB_BORN)


def test_unsubscribe_all(subscriber, written):
    subscriber.on_mob_born(lambda event: None)
    subscriber.on_end_of_day(lambda event: None)
    written.clear()
    subscriber._unsubscribe_all()
    assert subscriber._subscribed_events() == ()
    assert {packet.body.event_name for packet in written} == {
        EventName.MOB_BORN,
        EventName.END_OF_DAY,
    }
    assert all(p.header.message_purpose == MessagePurpose.UNSUBSCRIBE for p in written)


def test_each_subscription_has_a_distinct_request_id(subscriber, written):
    subscriber.on_mob_born(lambda event: None)
    subscriber.on_mob_killed(lambda event: None)
    assert subscriber._subscribed_events() == (EventName.MOB_BORN, EventName.MOB_KILLED)
    assert len(written) == 2
    first, second = (packet.to_dict()["header"]["requestId"] for packet in written)
    assert first
    assert second
    assert first != second