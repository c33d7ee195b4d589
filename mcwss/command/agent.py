"""Commands that control the agent of a player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mcwss.mctype import Direction, Position
from mcwss.rawjson import json_field

DirectionLike = Union[Direction, str]


def agent_position_request() -> str:
    """The command that requests the position of the agent."""
    return "agent getposition"


def agent_move_request(direction: DirectionLike) -> str:
    """The command that moves the agent one block in a direction."""
    return f"agent move {direction}"


def agent_turn_request(direction: DirectionLike) -> str:
    """The command that turns the agent; the direction is left or right."""
    return f"agent turn {direction}"


def agent_attack_request(direction: DirectionLike) -> str:
    """The command that makes the agent attack in a direction."""
    return f"agent attack {direction}"


def agent_place_request(direction: DirectionLike) -> str:
    """The command that makes the agent place the block in its first slot."""
    return f"agent place {direction}"


def agent_destroy_request(direction: DirectionLike) -> str:
    """The command that makes the agent destroy a block in a direction."""
    return f"agent destroy {direction}"


def agent_till_request(direction: DirectionLike) -> str:
    """The command that makes the agent till a dirt-like block in a direction."""
    return f"agent till {direction}"


@dataclass
class AgentPosition:
    """Response holding the position and yaw of the agent."""

    y_rotation: float = json_field("y-rot", 0.0, float)
    position: Position = json_field("position", Position(), Position.from_dict)
    status_code: int = json_field("statusCode", 0, int)
    status_message: str = json_field("statusMessage", "", str)


@dataclass
class AgentInstruction:
    """Response shared by the commands that instruct the agent to act."""

    status_code: int = json_field("statusCode", 0, int)
    status_message: str = json_field("statusMessage", "", str)