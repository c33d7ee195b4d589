import pytest

from mcwss.event.blocks import BlockPlaced, EndOfDay
from mcwss.event.client import SignInToXboxLive
from mcwss.event.measurements import Measurements
from mcwss.event.player import PlayerTravelled
from mcwss.event.registry import EVENTS, EventName, new_event


def test_every_name_has_an_event_class():
    assert set(EVENTS) == set(EventName)
    for name in EventName:
        assert type(new_event(name, {})) is EVENTS[name]


def test_xbox_live_names_use_source_spelling():
    assert EventName("SignInToXboxLive") is EventName.SIGN_IN_TO_XBOX_LIVE
    assert EventName("SignOutOfXboxLive") is EventName.SIGN_OUT_OF_XBOX_LIVE


def test_name_formats_as_value():
    assert f"{EventName('BlockPlaced')}" == "BlockPlaced"
    assert str(EventName("MobKilled")) == "MobKilled"


def test_new_event_from_dict():
    event = new_event("BlockPlaced", {"Block": "stone", "Type": 1, "Namespace": "minecraft"})
    assert event == BlockPlaced(block="stone", type=1, namespace="minecraft")


def test_new_event_from_json_text_and_enum():
    event = new_event(EventName.SIGN_IN_TO_XBOX_LIVE, '{"SignInUI": true, "Stage": 2}')
    assert event == SignInToXboxLive(sign_in_ui=True, stage=2)


def test_new_event_without_fields():
    assert new_event("EndOfDay", {"Biome": 1}) == EndOfDay()


def test_new_event_travelled_has_empty_measurements():
    event = new_event("PlayerTravelled", {"TravelMethodType": 5})
    assert isinstance(event, PlayerTravelled)
    assert event.travel_method_type == 5
    assert event.measurements == Measurements()


def test_new_event_each_name_builds_its_class():
    for name, cls in EVENTS.items():
        assert type(new_event(name, {})) is cls


def test_unknown_event_name_raises():
    with pytest.raises(ValueError, match="unknown event"):
        new_event("NotAnEvent", {})


def test_bad_properties_raise():
    with pytest.raises(ValueError):
        new_event("BlockPlaced", "[1, 2]")