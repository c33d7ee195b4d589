"""Events about the game rules of the world a player is in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcwss.rawjson import json_field


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


@dataclass
class GameRulesLoaded:
    """Sent when the game rules are loaded; holds every rule and its value."""

    command_block_output: bool = json_field("commandblockoutput", False, _to_bool)
    command_blocks_enabled: bool = json_field("commandblocksenabled", False, _to_bool)
    do_daylight_cycle: bool = json_field("dodaylightcycle", False, _to_bool)
    do_entity_drops: bool = json_field("doentitydrops", False, _to_bool)
    do_fire_tick: bool = json_field("dofiretick", False, _to_bool)
    do_immediate_respawn: bool = json_field("doimmediaterespawn", False, _to_bool)
    do_insomnia: bool = json_field("doinsomnia", False, _to_bool)
    do_mob_loot: bool = json_field("domobloot", False, _to_bool)
    do_mob_spawning: bool = json_field("domobspawning", False, _to_bool)
    do_tile_drops: bool = json_field("dotiledrops", False, _to_bool)
    do_weather_cycle: bool = json_field("doweathercycle", False, _to_bool)
    drowning_damage: bool = json_field("drowningdamage", False, _to_bool)
    experimental_gameplay: bool = json_field("experimentalgameplay", False, _to_bool)
    fall_damage: bool = json_field("falldamage", False, _to_bool)
    fire_damage: bool = json_field("firedamage", False, _to_bool)
    function_command_limit: int = json_field("functioncommandlimit", 0, int)
    keep_inventory: bool = json_field("keepinventory", False, _to_bool)
    max_command_chain_length: int = json_field("maxcommandchainlength", 0, int)
    mob_griefing: bool = json_field("mobgriefing", False, _to_bool)
    natural_regeneration: bool = json_field("naturalregeneration", False, _to_bool)
    pvp: bool = json_field("pvp", False, _to_bool)
    random_tick_speed: int = json_field("randomtickspeed", 0, int)
    send_command_feedback: bool = json_field("sendcommandfeedback", False, _to_bool)
    show_coordinates: bool = json_field("showcoordinates", False, _to_bool)
    show_death_messages: bool = json_field("showdeathmessages", False, _to_bool)
    tnt_explodes: bool = json_field("tntexplodes", False, _to_bool)


@dataclass
class GameRulesUpdated:
    """Sent for each game rule that changes.

    The values are a bool, an int or a float; old and new share a type.
    """

    game_rule_name: str = json_field("UpdatedOptionName", "", str)
    new_value: Any = json_field("UpdatedOptionNewValue")
    old_value: Any = json_field("UpdatedOptionOldValue")