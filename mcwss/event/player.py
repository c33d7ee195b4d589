"""Events about the player's messages and movement."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from mcwss.event.measurements import Measurable, Measurements
from mcwss.rawjson import json_field

TELEPORTATION_COMMAND = 0
TELEPORTATION_ENDER_PEARL = 1
TELEPORTATION_CHORUS_FRUIT = 2

TRAVEL_WALKING = 0
TRAVEL_SWIMMING_IN_WATER = 1
TRAVEL_FALLING = 2
TRAVEL_CLIMBING = 3
TRAVEL_SWIMMING_IN_LAVA = 4
TRAVEL_FLYING = 5
TRAVEL_VEHICLE = 6
TRAVEL_SNEAKING = 7
TRAVEL_SPRINTING = 8
TRAVEL_BOUNCING = 9


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
class PlayerMessage:
    """Sent when the player receives any message, including its own."""

    message: str = json_field("Message", "", _to_str)
    message_type: str = json_field("MessageType", "", _to_str)
    sender: str = json_field("Sender", "", _to_str)
    receiver: str = json_field("Receiver", "", _to_str)


@dataclass
class PlayerTeleported:
    """Sent when the player teleports, by command, ender pearl or chorus fruit."""

    meters_travelled: float = json_field("MetersTravelled", 0.0, _to_float)
    teleportation_cause: int = json_field("TeleportationCause", 0, _to_int)
    # 0 when teleported by a command, 87 for an ender pearl.
    teleportation_item: int = json_field("TeleportationItem", 0, _to_int)


@dataclass
class PlayerTransform:
    """Sent when the player is moved from one place to another, such as by teleporting."""

    player_y_rotation: float = json_field("PlayerYRot", 0.0, _to_float)
    player_id: str = json_field("PlayerId", "", _to_str)
    dimension: int = json_field("Dimension", 0, _to_int)
    position_x: float = json_field("PosX", 0.0, _to_float)
    position_y: float = json_field("PosY", 0.0, _to_float)
    position_z: float = json_field("PosZ", 0.0, _to_float)


@dataclass
class PlayerTravelled(Measurable):
    """Sent when the player travels; the distance travelled is in its measurements."""

    travel_method_type: int = json_field("TravelMethodType", 0, _to_int)
    has_relevant_buff: bool = json_field("HasRelevantBuff", False, _to_bool)
    mob_type: int = json_field("MobType", 0, _to_int)
    is_underwater: bool = json_field("IsUnderwater", False, _to_bool)
    measurements: Measurements = dataclasses.field(default_factory=Measurements, init=False)

    def consume_measurements(self, measurements: Measurements) -> None:
        """Store the movement measurements sent with the event."""
        super().consume_measurements(measurements)