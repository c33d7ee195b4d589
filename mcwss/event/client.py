"""Events about the client itself: Xbox Live sign-in, commands and vehicles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcwss.rawjson import json_field


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    return value


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


@dataclass
class SignInToXboxLive:
    """Sent when the player signs into Xbox Live from within the game."""

    sign_in_ui: bool = json_field("SignInUI", False, _to_bool)
    stage: int = json_field("Stage", 0, _to_int)
    timestamp: float = json_field("Timestamp", 0.0, _to_float)


@dataclass
class SignOutOfXboxLive:
    """Sent when the player signs out of Xbox Live."""


@dataclass
class SlashCommandExecuted:
    """Sent when the player executes a command that exists.

    The error list holds the error codes encountered, joined by newlines.
    """

    command_name: str = json_field("CommandName", "", _to_str)
    error_count: int = json_field("ErrorCount", 0, _to_int)
    error_list: str = json_field("ErrorList", "", _to_str)
    success_count: int = json_field("SuccessCount", 0, _to_int)


@dataclass
class VehicleExited:
    """Sent when the player exits a vehicle such as a horse or a minecart.

    The trip duration is measured in seconds despite its key naming minutes.
    """

    furthest_axis_meters_travelled: int = json_field("FurthestAxisMetersTravelled", 0, _to_int)
    mob_type: int = json_field("MobType", 0, _to_int)
    travel_method_id: int = json_field("TravelMethodID", 0, _to_int)
    trip_duration: int = json_field("TripDurationMinutes", 0, _to_int)