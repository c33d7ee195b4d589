"""Events about blocks, books, achievements and the passing of days."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcwss.rawjson import json_field

ACHIEVEMENT_RENEWABLE_ENERGY = 40

DESTRUCTION_BREAK = 0

PLACEMENT_DEFAULT = 0


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
class AwardAchievement:
    """Sent when the player is awarded an achievement; never with cheats enabled."""

    achievement_id: int = json_field("AchievementID", 0, _to_int)


@dataclass
class BlockBroken:
    """Sent when the player breaks a block."""

    aux_type: int = json_field("AuxType", 0, _to_int)
    block: str = json_field("Block", "", _to_str)
    variant: int = json_field("Variant", 0, _to_int)
    namespace: str = json_field("Namespace", "", _to_str)
    type: int = json_field("Type", 0, _to_int)
    destruction_method: int = json_field("DestructionMethod", 0, _to_int)
    tool_item_type: int = json_field("ToolItemType", 0, _to_int)


@dataclass
class BlockPlaced:
    """Sent when the player places a block."""

    aux_type: int = json_field("AuxType", 0, _to_int)
    block: str = json_field("Block", "", _to_str)
    namespace: str = json_field("Namespace", "", _to_str)
    type: int = json_field("Type", 0, _to_int)
    placement_method: int = json_field("PlacementMethod", 0, _to_int)
    tool_item_type: int = json_field("ToolItemType", 0, _to_int)


@dataclass
class BookEdited:
    """Sent when the player closes or signs a book it edited.

    The type is 387 for a signed (written) book and 386 for a writable one.
    """

    type: int = json_field("Type", 0, _to_int)
    page_count: int = json_field("PageCount", 0, _to_int)


@dataclass
class EndOfDay:
    """Sent at sunrise when a day passed without its time being changed."""


@dataclass
class SignedBookOpened:
    """Sent when the player opens a signed book."""

    is_author: bool = json_field("IsAuthor", False, _to_bool)
    network_type: int = json_field("NetworkType", 0, _to_int)