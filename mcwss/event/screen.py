"""The event sent when the client switches screens, with known screen names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from mcwss.mctype import Direction
from mcwss.rawjson import json_field

SCREEN_START = "start_screen"
SCREEN_SETTINGS_GAME = "screen_world_controls_and_settings - game_tab"
SCREEN_SETTINGS_MULTIPLAYER = "screen_world_controls_and_settings - multiplayer_tab"
SCREEN_SETTINGS_KEYBOARD_AND_MOUSE = "screen_world_controls_and_settings - keyboard_and_mouse_tab"
SCREEN_SETTINGS_CONTROLLER = "screen_world_controls_and_settings - controller_tab"
SCREEN_SETTINGS_TOUCH = "screen_world_controls_and_settings - touch_tab"
SCREEN_SETTINGS_PROFILE = "screen_world_controls_and_settings - profile_tab"
SCREEN_SETTINGS_VIDEO = "screen_world_controls_and_settings - video_tab"
SCREEN_SETTINGS_SOUND = "screen_world_controls_and_settings - sound_tab"
SCREEN_SETTINGS_GLOBAL_RESOURCES = "screen_world_controls_and_settings - global_texture_pack_tab"
SCREEN_SETTINGS_HOW_TO_PLAY = "screen_world_controls_and_settings - how_to_play"
SCREEN_SETTINGS_RESOURCE_PACKS = "screen_world_controls_and_settings - level_texture_pack_tab"
SCREEN_SETTINGS_BEHAVIOUR_PACKS = "screen_world_controls_and_settings - addon_tab"
SCREEN_SETTINGS_LANGUAGE = "screen_controls_and_settings - language_tab"
SCREEN_SETTINGS_STORAGE = "screen_controls_and_settings - storage_tab"
SCREEN_ACHIEVEMENT = "achievement_screen"
SCREEN_STORE = "store_data_driven_screen - store_home_screen"

SCREEN_WORLDS = "play_screen - worlds"
SCREEN_WORLD_TEMPLATES = "world_templates_screen"
SCREEN_WORLD_CREATE_GAME = "screen_world_create - game_tab"
SCREEN_WORLD_CREATE_MULTIPLAYER = "screen_world_create - multiplayer_tab"
SCREEN_WORLD_CREATE_TEXTURE_PACKS = "screen_world_create - level_texture_pack_tab"
SCREEN_WORLD_CREATE_BEHAVIOUR_PACKS = "screen_world_create - addon_tab"

SCREEN_REALM_CREATE = "realms_create_screen"
SCREEN_REALM_JOIN_BY_CODE = "friends  - join_by_code"

SCREEN_WORLD_LOADING_PROGRESS = "world_loading_progress_screen - local_world_load"
SCREEN_WORLD_LOADING_JOINING_MULTIPLAYER_SERVER = (
    "world_loading_progress_screen - joining_multiplayer_external_server"
)
SCREEN_WORLD_SAVING_PROGRESS = "world_saving_progress_screen"

SCREEN_RATING_PROMPT = "rating_prompt_screen"

SCREEN_FRIENDS = "play_screen - friends"
SCREEN_SERVERS = "play_screen - servers"
SCREEN_ADD_EXTERNAL_SERVER = "add_external_server_screen_new"
SCREEN_EDIT_EXTERNAL_SERVER = "add_external_server_screen_edit"

SCREEN_IN_GAME_PLAY = "in_game_play_screen"
SCREEN_CHAT = "chat_screen"
SCREEN_PAUSE = "pause_screen"
SCREEN_INVENTORY = "inventory_screen"
SCREEN_FEEDBACK = "feedbackScreen.title - feedbackScreen.body"
SCREEN_SKIN_PICKER = "skin_picker_screen"
SCREEN_EXPANDED_SKIN_PACK = "expanded_skin_pack_screen"
SCREEN_INVITE = "invite_screen"
SCREEN_HOW_TO_PLAY = "how_to_play_screen"


def _to_direction(value: Any) -> Union[Direction, str]:
    text = str(value)
    try:
        return Direction(text)
    except ValueError:
        return text


@dataclass
class ScreenChanged:
    """Sent when the client moves to a different screen, such as the chat screen.

    Many screen names are dynamic, so the name is kept as a plain string.
    """

    direction: Union[Direction, str] = json_field("Direction", "", _to_direction)
    previous_screen_name: str = json_field("PreviousScreenName", "", str)
    screen_name: str = json_field("ScreenName", "", str)
    screen_version: str = json_field("ScreenVersion", "", str)
    seconds: float = json_field("Seconds", 0.0, float)
    timestamp: float = json_field("TimeStamp", 0.0, float)