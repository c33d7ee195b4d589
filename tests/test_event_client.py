import pytest

from mcwss.event.client import (
    SignInToXboxLive,
    SignOutOfXboxLive,
    SlashCommandExecuted,
    VehicleExited,
)
from mcwss.rawjson import decode


def test_sign_in_fields():
    event = decode(SignInToXboxLive, {"SignInUI": True, "Stage": 2, "Timestamp": 12})
    assert event.sign_in_ui is True
    assert event.stage == 2
    assert event.timestamp == 12.0
    assert isinstance(event.timestamp, float)


def test_sign_in_rejects_bool_timestamp():
    with pytest.raises(ValueError):
        decode(SignInToXboxLive, {"Timestamp": True})


def test_sign_out_has_no_fields():
    assert decode(SignOutOfXboxLive, '{"Whatever": "x"}') == SignOutOfXboxLive()


def test_slash_command_executed_fields():
    event = decode(
        SlashCommandExecuted,
        {
            "CommandName": "setblock",
            "ErrorCount": 1,
            "ErrorList": "commands.generic.num.tooBig",
            "SuccessCount": 0,
        },
    )
    assert event == SlashCommandExecuted(
        command_name="setblock",
        error_count=1,
        error_list="commands.generic.num.tooBig",
        success_count=0,
    )


def test_slash_command_error_list_optional():
    event = decode(SlashCommandExecuted, {"CommandName": "say", "SuccessCount": 1})
    assert event.error_list == ""
    assert event.success_count == 1


def test_vehicle_exited_trip_duration_key():
    event = decode(
        VehicleExited,
        {
            "FurthestAxisMetersTravelled": 25,
            "MobType": 84,
            "TravelMethodID": 0,
            "TripDurationMinutes": 31,
        },
    )
    assert event.furthest_axis_meters_travelled == 25
    assert event.mob_type == 84
    assert event.travel_method_id == 0
    assert event.trip_duration == 31


def test_vehicle_exited_rejects_fractional_int():
    with pytest.raises(ValueError):
        decode(VehicleExited, {"MobType": 84.5})