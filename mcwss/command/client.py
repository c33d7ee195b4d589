"""Client-side commands, available even on third-party servers."""

from __future__ import annotations

import base64
from dataclasses import dataclass

from mcwss.rawjson import json_field


def _raw_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def close_chat_request() -> str:
    """The command that closes the chat window of a player."""
    return "closechat"


@dataclass
class CloseChat:
    """Response to closing the chat window."""

    status_code: int = json_field("statusCode", 0, int)
    status_message: str = json_field("statusMessage", "", str)


def edu_client_info_request() -> str:
    """The command that requests education edition information of a player."""
    return "geteduclientinfo"


@dataclass
class EduClientInfo:
    """Education edition related information about a connected player."""

    is_edu: bool = json_field("isEdu", False)
    companion_protocol_version: int = json_field("companionProtocolVersion", 0, int)
    is_host: bool = json_field("isHost", False)
    permission: int = json_field("permission", 0, int)
    player_session_uuid: str = json_field("playersessionuuid", "", str)
    client_uuid: str = json_field("clientuuid", "", str)
    status_code: int = json_field("statusCode", 0, int)


def enable_encryption_request(public_key: bytes, salt: bytes) -> str:
    """The command that enables encryption with the server's public key and salt.

    The salt must be exactly 16 bytes long; otherwise ValueError is raised.
    """
    if len(salt) != 16:
        raise ValueError(
            f"invalid salt given: expected salt with length 16, but got salt with length {len(salt)}"
        )
    return f'enableencryption "{_raw_base64(public_key)}" "{_raw_base64(salt)}"'


@dataclass
class EnableEncryption:
    """Response holding the base64 encoded public key of the client."""

    public_key: str = json_field("publicKey", "", str)
    status_code: int = json_field("statusCode", 0, int)
    status_message: str = json_field("statusMessage", "", str)


def local_player_name_request() -> str:
    """The command that requests the name of the connected player."""
    return "getlocalplayername"


@dataclass
class LocalPlayerName:
    """Response holding the name of the connected player."""

    local_player_name: str = json_field("localplayername", "", str)
    status_code: int = json_field("statusCode", 0, int)
    status_message: str = json_field("statusMessage", "", str)