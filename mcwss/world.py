"""The world a player is in, and changes made to it."""

from __future__ import annotations

from typing import Any

from mcwss.command.chat import say_request
from mcwss.command.world import particle_request, set_block_request
from mcwss.mctype import BlockPosition, Position


def _format(message: str, args: tuple) -> str:
    return message % args if args else message


class World:
    """The world a player joined, either a local world or a server.

    Servers with several worlds are treated as having one.
    """

    def __init__(self, player: Any) -> None:
        self._player = player

    def broadcast(self, message: str, *args: Any) -> None:
        """Broadcast a %-formatted message to every player in the world."""
        self._player.exec(say_request(_format(message, args)), None, None)

    def set_block(self, position: BlockPosition, block: str, data_value: int) -> None:
        """Set a block at a position with a data value from 0 to 15.

        Raises ValueError for a data value outside that range.
        """
        if not 0 <= data_value <= 15:
            raise ValueError(f"block data value {data_value} exceeds the max value of 15")
        self._player.exec(set_block_request(position, block, data_value, "replace"), None, None)

    def destroy_block(self, position: BlockPosition) -> None:
        """Destroy the block at a position with the usual particles and sounds."""
        self._player.exec(set_block_request(position, "air", 0, "destroy"), None, None)

    def spawn_particle(self, particle: str, position: Position) -> None:
        """Spawn the named particle at a position."""
        self._player.exec(particle_request(particle, position), None, None)


def escape_message(message: str) -> str:
    """Escape backslashes and quotes so the message can be put in a command."""
    return message.replace("\\", "\\\\").replace("'", "\\'").replace('"', '\\"')