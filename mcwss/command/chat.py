"""Commands that send chat messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from mcwss.mctype import Target
from mcwss.rawjson import json_field

TargetLike = Union[Target, str]


def say_request(message: str) -> str:
    """The command that broadcasts a message to all players in a world."""
    return f"say {message}"


@dataclass
class Say:
    """Response to a broadcast message."""

    message: str = json_field("message", "", str)
    status_code: int = json_field("statusCode", 0, int)


def tell_request(target: TargetLike, message: str) -> str:
    """The command that sends a private message to a target."""
    return f"tell {target} {message}"


@dataclass
class Tell:
    """Response to a private message."""

    status_message: str = json_field("statusMessage", "", str)
    status_code: int = json_field("statusCode", 0, int)


def tell_raw_request(target: TargetLike, *lines: str) -> str:
    """The tellraw command sending each line as a raw text component.

    The lines are inserted as they are; no escaping or formatting is done.
    """
    components = ",".join('{"text":"' + text + '"}' for text in lines)
    return f'tellraw {target} {{"rawtext":[{components}]}}'


@dataclass
class TellRaw:
    """Response to a raw message, naming the players that received it."""

    recipients: List[str] = json_field("recipient", [], list)
    status_code: int = json_field("statusCode", 0, int)