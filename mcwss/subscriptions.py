"""Subscribing to the events a player's client sends."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar, Union

from mcwss.event.registry import EventName
from mcwss.protocol import MessagePurpose, Packet, new_event_request

H = TypeVar("H", bound=Callable[[Any], Any])
NameLike = Union[EventName, str]


def _event_name(name: NameLike) -> NameLike:
    try:
        return EventName(str(name))
    except ValueError:
        return str(name)


class EventSubscriber:
    """Keeps one handler per event and sends the subscription packets.

    ``write`` is called with each subscribe and unsubscribe packet. Every
    ``on_*`` method returns the handler, so it can serve as a decorator.
    """

    def __init__(self, write: Callable[[Packet], Any]) -> None:
        self._subscription_writer = write
        self._handlers: Dict[NameLike, Callable[[Any], Any]] = {}
        self._handlers_lock = threading.Lock()

    def _on(self, event_name: NameLike, handler: H) -> H:
        if not callable(handler):
            raise TypeError(f"event handler must be callable, got {type(handler).__name__}")
        name = _event_name(event_name)
        with self._handlers_lock:
            self._handlers[name] = handler
        self._subscription_writer(new_event_request(name, MessagePurpose.SUBSCRIBE))
        return handler

    def _unsubscribe(self, event_name: NameLike) -> None:
        name = _event_name(event_name)
        with self._handlers_lock:
            self._handlers.pop(name, None)
        self._subscription_writer(new_event_request(name, MessagePurpose.UNSUBSCRIBE))

    def _unsubscribe_all(self) -> None:
        with self._handlers_lock:
            names = list(self._handlers)
            self._handlers.clear()
        for name in names:
            self._subscription_writer(new_event_request(name, MessagePurpose.UNSUBSCRIBE))

    def _handler_for(self, event_name: NameLike) -> Optional[Callable[[Any], Any]]:
        name = _event_name(event_name)
        with self._handlers_lock:
            return self._handlers.get(name)

    def _subscribed_events(self) -> Tuple[NameLike, ...]:
        with self._handlers_lock:
            return tuple(self._handlers)

    def on_game_rules_loaded(self, handler: H) -> H:
        """Handle the game rules being loaded when the player joins a game."""
        return self._on(EventName.GAME_RULES_LOADED, handler)

    def on_game_rules_updated(self, handler: H) -> H:
        """Handle a change to a single game rule."""
        return self._on(EventName.GAME_RULES_UPDATED, handler)

    def on_mob_born(self, handler: H) -> H:
        """Handle mobs born from two mobs the player fed."""
        return self._on(EventName.MOB_BORN, handler)

    def on_mob_killed(self, handler: H) -> H:
        """Handle mobs the player killed directly."""
        return self._on(EventName.MOB_KILLED, handler)

    def on_award_achievement(self, handler: H) -> H:
        """Handle achievements awarded to the player."""
        return self._on(EventName.AWARD_ACHIEVEMENT, handler)

    def on_slash_command_executed(self, handler: H) -> H:
        """Handle existing commands the player executed."""
        return self._on(EventName.SLASH_COMMAND_EXECUTED, handler)

    def on_screen_changed(self, handler: H) -> H:
        """Handle the player switching to a different screen."""
        return self._on(EventName.SCREEN_CHANGED, handler)

    def on_script_loaded(self, handler: H) -> H:
        """Handle scripts loaded by the player."""
        return self._on(EventName.SCRIPT_LOADED, handler)

    def on_script_ran(self, handler: H) -> H:
        """Handle scripts run right after being loaded."""
        return self._on(EventName.SCRIPT_RAN, handler)

    def on_start_world(self, handler: H) -> H:
        """Handle the player starting a world from the main menu."""
        return self._on(EventName.START_WORLD, handler)

    def on_world_loaded(self, handler: H) -> H:
        """Handle the player loading a world or joining a server."""
        return self._on(EventName.WORLD_LOADED, handler)

    def on_mob_interacted(self, handler: H) -> H:
        """Handle interactions with mobs that have a result."""
        return self._on(EventName.MOB_INTERACTED, handler)

    def on_end_of_day(self, handler: H) -> H:
        """Handle a day ending naturally."""
        return self._on(EventName.END_OF_DAY, handler)

    def on_signed_book_opened(self, handler: H) -> H:
        """Handle signed books opened by the player."""
        return self._on(EventName.SIGNED_BOOK_OPENED, handler)

    def on_book_edited(self, handler: H) -> H:
        """Handle books the player edited and closed."""
        return self._on(EventName.BOOK_EDITED, handler)

    def on_teleported(self, handler: H) -> H:
        """Handle teleportations of the player."""
        return self._on(EventName.PLAYER_TELEPORTED, handler)

    def on_transform(self, handler: H) -> H:
        """Handle transformations of the player, such as by teleporting."""
        return self._on(EventName.PLAYER_TRANSFORM, handler)

    def on_travelled(self, handler: H) -> H:
        """Handle the player travelling."""
        return self._on(EventName.PLAYER_TRAVELLED, handler)

    def on_item_acquired(self, handler: H) -> H:
        """Handle items the player acquired."""
        return self._on(EventName.ITEM_ACQUIRED, handler)

    def on_item_dropped(self, handler: H) -> H:
        """Handle items the player dropped."""
        return self._on(EventName.ITEM_DROPPED, handler)

    def on_item_named(self, handler: H) -> H:
        """Handle items the player named with an anvil."""
        return self._on(EventName.ITEM_NAMED, handler)

    def on_item_smelted(self, handler: H) -> H:
        """Handle smelted items the player took out."""
        return self._on(EventName.ITEM_SMELTED, handler)

    def on_item_used(self, handler: H) -> H:
        """Handle items the player used."""
        return self._on(EventName.ITEM_USED, handler)

    def on_item_interacted(self, handler: H) -> H:
        """Handle interactions the player made using items."""
        return self._on(EventName.ITEM_INTERACTED, handler)

    def on_item_equipped(self, handler: H) -> H:
        """Handle wearable items the player equipped."""
        return self._on(EventName.ITEM_EQUIPPED, handler)

    def on_item_crafted(self, handler: H) -> H:
        """Handle items the player crafted."""
        return self._on(EventName.ITEM_CRAFTED, handler)

    def on_block_placed(self, handler: H) -> H:
        """Handle blocks the player placed."""
        return self._on(EventName.BLOCK_PLACED, handler)

    def on_block_broken(self, handler: H) -> H:
        """Handle blocks the player broke."""
        return self._on(EventName.BLOCK_BROKEN, handler)

    def on_player_message(self, handler: H) -> H:
        """Handle messages sent and received by the client."""
        return self._on(EventName.PLAYER_MESSAGE, handler)

    def on_sign_in_to_xbox_live(self, handler: H) -> H:
        """Handle the player signing into Xbox Live."""
        return self._on(EventName.SIGN_IN_TO_XBOX_LIVE, handler)

    def on_sign_out_of_xbox_live(self, handler: H) -> H:
        """Handle the player signing out of Xbox Live."""
        return self._on(EventName.SIGN_OUT_OF_XBOX_LIVE, handler)

    def on_vehicle_exited(self, handler: H) -> H:
        """Handle the player leaving a vehicle."""
        return self._on(EventName.VEHICLE_EXITED, handler)