"""Configuration of the websocket server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Config:
    """Where the websocket server listens.

    ``handler_pattern`` is the path the websocket is served on and
    ``address`` is the host and port, such as ':8000'.
    """

    handler_pattern: str = "/ws"
    address: str = ":8000"


def default_config() -> Config:
    """The configuration reachable at 'localhost:8000/ws'."""
    return Config(handler_pattern="/ws", address=":8000")