"""Names of the events the client sends and the classes that hold them."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Union

from mcwss.event.blocks import (
    AwardAchievement,
    BlockBroken,
    BlockPlaced,
    BookEdited,
    EndOfDay,
    SignedBookOpened,
)
from mcwss.event.client import (
    SignInToXboxLive,
    SignOutOfXboxLive,
    SlashCommandExecuted,
    VehicleExited,
)
from mcwss.event.game_rules import GameRulesLoaded, GameRulesUpdated
from mcwss.event.items import (
    ItemAcquired,
    ItemCrafted,
    ItemDropped,
    ItemEquipped,
    ItemInteracted,
    ItemNamed,
    ItemSmelted,
    ItemUsed,
)
from mcwss.event.mobs import MobBorn, MobInteracted, MobKilled
from mcwss.event.player import (
    PlayerMessage,
    PlayerTeleported,
    PlayerTransform,
    PlayerTravelled,
)
from mcwss.event.screen import ScreenChanged
from mcwss.event.world import ScriptLoaded, ScriptRan, StartWorld, WorldLoaded
from mcwss.rawjson import decode


class EventName(str, Enum):
    """The name of an event, as used in subscriptions and event responses."""

    AWARD_ACHIEVEMENT = "AwardAchievement"
    BLOCK_PLACED = "BlockPlaced"
    BLOCK_BROKEN = "BlockBroken"
    END_OF_DAY = "EndOfDay"
    GAME_RULES_LOADED = "GameRulesLoaded"
    GAME_RULES_UPDATED = "GameRulesUpdated"
    PLAYER_MESSAGE = "PlayerMessage"
    PLAYER_TELEPORTED = "PlayerTeleported"
    PLAYER_TRAVELLED = "PlayerTravelled"
    PLAYER_TRANSFORM = "PlayerTransform"
    ITEM_ACQUIRED = "ItemAcquired"
    ITEM_CRAFTED = "ItemCrafted"
    ITEM_DROPPED = "ItemDropped"
    ITEM_EQUIPPED = "ItemEquipped"
    ITEM_INTERACTED = "ItemInteracted"
    ITEM_NAMED = "ItemNamed"
    ITEM_SMELTED = "ItemSmelted"
    ITEM_USED = "ItemUsed"
    BOOK_EDITED = "BookEdited"
    SIGNED_BOOK_OPENED = "SignedBookOpened"
    MOB_BORN = "MobBorn"
    MOB_INTERACTED = "MobInteracted"
    MOB_KILLED = "MobKilled"
    START_WORLD = "StartWorld"
    WORLD_LOADED = "WorldLoaded"
    WORLD_GENERATED = "WorldGenerated"
    SCRIPT_LOADED = "ScriptLoaded"
    SCRIPT_RAN = "ScriptRan"
    SCREEN_CHANGED = "ScreenChanged"
    SLASH_COMMAND_EXECUTED = "SlashCommandExecuted"
    SIGN_IN_TO_XBOX_LIVE = "SignInToXboxLive"
    SIGN_OUT_OF_XBOX_LIVE = "SignOutOfXboxLive"
    VEHICLE_EXITED = "VehicleExited"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


# A generated world carries the same data as a loaded one.
EVENTS: Dict[EventName, type] = {
    EventName.AWARD_ACHIEVEMENT: AwardAchievement,
    EventName.BLOCK_PLACED: BlockPlaced,
    EventName.BLOCK_BROKEN: BlockBroken,
    EventName.END_OF_DAY: EndOfDay,
    EventName.GAME_RULES_LOADED: GameRulesLoaded,
    EventName.GAME_RULES_UPDATED: GameRulesUpdated,
    EventName.PLAYER_MESSAGE: PlayerMessage,
    EventName.PLAYER_TELEPORTED: PlayerTeleported,
    EventName.PLAYER_TRAVELLED: PlayerTravelled,
    EventName.PLAYER_TRANSFORM: PlayerTransform,
    EventName.ITEM_ACQUIRED: ItemAcquired,
    EventName.ITEM_CRAFTED: ItemCrafted,
    EventName.ITEM_DROPPED: ItemDropped,
    EventName.ITEM_EQUIPPED: ItemEquipped,
    EventName.ITEM_INTERACTED: ItemInteracted,
    EventName.ITEM_NAMED: ItemNamed,
    EventName.ITEM_SMELTED: ItemSmelted,
    EventName.ITEM_USED: ItemUsed,
    EventName.BOOK_EDITED: BookEdited,
    EventName.SIGNED_BOOK_OPENED: SignedBookOpened,
    EventName.MOB_BORN: MobBorn,
    EventName.MOB_INTERACTED: MobInteracted,
    EventName.MOB_KILLED: MobKilled,
    EventName.START_WORLD: StartWorld,
    EventName.WORLD_LOADED: WorldLoaded,
    EventName.WORLD_GENERATED: WorldLoaded,
    EventName.SCRIPT_LOADED: ScriptLoaded,
    EventName.SCRIPT_RAN: ScriptRan,
    EventName.SCREEN_CHANGED: ScreenChanged,
    EventName.SLASH_COMMAND_EXECUTED: SlashCommandExecuted,
    EventName.SIGN_IN_TO_XBOX_LIVE: SignInToXboxLive,
    EventName.SIGN_OUT_OF_XBOX_LIVE: SignOutOfXboxLive,
    EventName.VEHICLE_EXITED: VehicleExited,
}


def new_event(name: Union[EventName, str], properties: Any) -> Any:
    """Build the event named from its properties (JSON text, bytes or a parsed object).

    Raises ValueError for an unknown event name or properties that do not fit
    the event.
    """
    try:
        event_name = EventName(str(name))
    except ValueError:
        raise ValueError(f"unknown event with name {name}") from None
    return decode(EVENTS[event_name], properties)