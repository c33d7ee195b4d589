"""Properties shared by every event the client sends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcwss.rawjson import json_field


def _to_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


@dataclass
class Properties:
    """The properties every event response holds, next to its own ones."""

    account_type: int = json_field("AccountType", 0, int)
    active_session_id: str = json_field("ActiveSessionID", "", str)
    app_session_id: str = json_field("AppSessionID", "", str)
    biome: int = json_field("Biome", 0, int)
    build: str = json_field("Build", "", str)
    build_platform: int = json_field("BuildPlat", 0, int)
    achievements: bool = json_field("Cheevos", False, _to_bool)
    client_id: str = json_field("ClientId", "", str)
    current_input: int = json_field("CurrentInput", 0, int)
    current_num_players: int = json_field("CurrentNumPlayers", 0, int)
    device_session_id: str = json_field("DeviceSessionId", "", str)
    dimension: int = json_field("Dim", 0, int)
    global_multiplayer_correlation_id: str = json_field("GlobalMultiplayerCorrelationId", "", str)
    mode: int = json_field("Mode", 0, int)
    multiplayer_correlation_id: str = json_field("MultiplayerCorrelationId", "", str)
    network_type: int = json_field("NetworkType", 0, int)
    platform: str = json_field("Plat", "", str)
    player_game_mode: int = json_field("PlayerGameMode", 0, int)
    schema_commit_hash: str = json_field("SchemaCommitHash", "", str)
    sequence: int = json_field("Seq", 0, int)
    server_id: str = json_field("ServerId", "", str)
    treatments: str = json_field("Treatments", "", str)
    # Only set when the player is logged into Xbox Live.
    user_id: str = json_field("UserId", "", str)
    world_feature: int = json_field("WorldFeature", 0, int)
    world_session_id: str = json_field("WorldSessionId", "", str)
    is_trial: int = json_field("isTrial", 0, int)
    edition_type: str = json_field("editionType", "", str)
    locale: str = json_field("locale", "", str)
    vr_mode: bool = json_field("vrMode", False, _to_bool)
    build_type_id: int = json_field("BuildTypeID", 0, int)