"""The agent entity of a player, controlled through commands."""

from __future__ import annotations

from typing import Any, Callable, Union

from mcwss.command.agent import (
    AgentPosition,
    agent_attack_request,
    agent_destroy_request,
    agent_move_request,
    agent_place_request,
    agent_position_request,
    agent_till_request,
    agent_turn_request,
)
from mcwss.mctype import Direction, Position

DirectionLike = Union[Direction, str]


class Agent:
    """The agent of a player: an entity that can be created and controlled over the websocket."""

    def __init__(self, player: Any) -> None:
        self._player = player

    def position(self, callback: Callable[[Position], Any]) -> None:
        """Request the agent's position and pass it to ``callback`` once it arrives."""
        self._player.exec(
            agent_position_request(),
            lambda response: callback(response.position),
            AgentPosition,
        )

    def rotation(self, callback: Callable[[float], Any]) -> None:
        """Request the agent's yaw and pass it to ``callback`` once it arrives."""
        self._player.exec(
            agent_position_request(),
            lambda response: callback(response.y_rotation),
            AgentPosition,
        )

    def move(self, direction: DirectionLike, metres: int) -> None:
        """Move the agent a number of metres in a direction, one command per metre."""
        for _ in range(metres):
            self._player.exec(agent_move_request(direction), None, None)

    def turn_right(self) -> None:
        """Turn the agent 90 degrees to the right."""
        self._player.exec(agent_turn_request(Direction.RIGHT), None, None)

    def turn_left(self) -> None:
        """Turn the agent 90 degrees to the left."""
        self._player.exec(agent_turn_request(Direction.LEFT), None, None)

    def attack(self, direction: DirectionLike) -> None:
        """Make the agent attack up to one block in a direction."""
        self._player.exec(agent_attack_request(direction), None, None)

    def use_held_item(self, direction: DirectionLike) -> None:
        """Make the agent place its held block in a direction."""
        self._player.exec(agent_place_request(direction), None, None)

    def destroy_block(self, direction: DirectionLike) -> None:
        """Make the agent destroy a block in a direction, even an unbreakable one."""
        self._player.exec(agent_destroy_request(direction), None, None)

    def till_block(self, direction: DirectionLike) -> None:
        """Make the agent till a block in a direction with a hoe.

        This does not appear to work outside education edition.
        """
        self._player.exec(agent_till_request(direction), None, None)