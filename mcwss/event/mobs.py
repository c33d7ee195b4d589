"""Events about mobs being born, interacted with and killed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcwss.rawjson import json_field

INTERACT_TAME = 2
INTERACT_WITH_GOLEM = 4
INTERACT_SHAVE = 5
INTERACT_MILK = 6
INTERACT_TRADE = 7
INTERACT_FEED = 8
INTERACT_IGNITE = 9
INTERACT_DYE = 10
INTERACT_NAMED = 11
INTERACT_LEASH = 12
INTERACT_UNLEASH = 13
INTERACT_TOGGLE_SITTING = 16

KILL_MELEE_ATTACK = 2
KILL_SHOT = 3
KILL_EXPLOSION = 11
KILL_SPLASH_POTION = 14


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    return value


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


@dataclass
class MobBorn:
    """Sent when a mob is born from two mobs the player bred."""

    baby_colour: int = json_field("BabyColor", 0, _to_int)
    baby_type: int = json_field("BabyType", 0, _to_int)
    baby_variant: int = json_field("BabyVariant", 0, _to_int)


@dataclass
class MobInteracted:
    """Sent when the player interacts with a mob in a way that has a result."""

    interaction_type: int = json_field("InteractionType", 0, _to_int)
    mob_type: int = json_field("MobType", 0, _to_int)
    mob_color: int = json_field("MobColor", 0, _to_int)
    mob_variant: int = json_field("MobVariant", 0, _to_int)


@dataclass
class MobKilled:
    """Sent when the player directly kills a living entity."""

    armour_feet_aux_type: int = json_field("ArmorFeetAuxType", 0, _to_int)
    armour_feet_id: int = json_field("ArmorFeetId", 0, _to_int)
    armour_head_aux_type: int = json_field("ArmorHeadAuxType", 0, _to_int)
    armour_head_id: int = json_field("ArmorHeadId", 0, _to_int)
    armour_legs_aux_type: int = json_field("ArmorLegsAuxType", 0, _to_int)
    armour_legs_id: int = json_field("ArmorLegsId", 0, _to_int)
    armour_torso_aux_type: int = json_field("ArmorTorsoAuxType", 0, _to_int)
    armour_torso_id: int = json_field("ArmorTorsoId", 0, _to_int)
    is_monster: bool = json_field("IsMonster", False, _to_bool)
    kill_method_type: int = json_field("KillMethodType", 0, _to_int)
    mob_type: int = json_field("MobType", 0, _to_int)
    player_is_hidden_from: bool = json_field("PlayerIsHiddenFrom", False, _to_bool)
    weapon_type: int = json_field("WeaponType", 0, _to_int)