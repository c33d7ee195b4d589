"""Events about starting and loading worlds and running scripts."""

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


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


@dataclass
class StartWorld:
    """Sent when the player starts a world from the main menu.

    The host is the server address, and empty for local worlds.
    """

    host: str = json_field("Host", "", _to_str)


@dataclass
class WorldLoaded:
    """Sent when the player's world is loaded, for both local worlds and servers."""

    contains_behaviour_packs: bool = json_field("ContainsAddons", False, _to_bool)
    contains_texture_packs: bool = json_field("ContainsTextures", False, _to_bool)
    is_from_world_template: bool = json_field("IsFromWorldTemplate", False, _to_bool)
    required_host_textures_to_join: bool = json_field(
        "RequiredHostTexturesToJoin", False, _to_bool
    )
    save_id: str = json_field("SaveId", "", _to_str)
    using_experimental_gameplay: bool = json_field("UsingExperimentalGameplay", False, _to_bool)
    world_seed: int = json_field("WorldSeed", 0, _to_int)


@dataclass
class ScriptLoaded:
    """Sent after a script was loaded but before it ran."""

    script_hash: int = json_field("ScriptHash", 0, _to_int)
    script_name: str = json_field("ScriptName", "", _to_str)


@dataclass
class ScriptRan:
    """Sent when the player first runs a script downloaded from the world."""

    script_hash: int = json_field("ScriptHash", 0, _to_int)
    script_name: str = json_field("ScriptName", "", _to_str)
    script_ran_client_side: bool = json_field("ScriptRanClientside", False, _to_bool)
    script_succeeded: bool = json_field("ScriptSucceeded", False, _to_bool)