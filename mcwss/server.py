"""The websocket server that clients connect to."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, Set, Tuple
from urllib.parse import urlsplit

import websockets
from websockets.exceptions import ConnectionClosed

from mcwss.config import Config, default_config
from mcwss.player import PacketError, Player
from mcwss.protocol import decode_packet

logger = logging.getLogger(__name__)

PlayerHandler = Callable[[Player], Any]


def _split_address(address: str) -> Tuple[Optional[str], int]:
    host, _, port = address.rpartition(":")
    host = host.strip("[]")
    try:
        number = int(port)
    except ValueError:
        raise ValueError(f"invalid address {address!r}: missing port") from None
    return (host or None), number


def _request_path(connection: Any) -> Optional[str]:
    request = getattr(connection, "request", None)
    path = getattr(request, "path", None)
    if path is None:
        path = getattr(connection, "path", None)
    if path is None:
        return None
    return urlsplit(path).path


def _ignore(player: Player) -> None:
    return None


class Server:
    """The websocket server players connect to using '/connect'."""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else default_config()
        self._players: Set[Player] = set()
        self._connection_handler: PlayerHandler = _ignore
        self._disconnection_handler: PlayerHandler = _ignore

    def run(self) -> None:
        """Run the server, blocking until it is stopped."""
        asyncio.run(self.serve())

    async def serve(self) -> None:
        """Serve websocket connections on the configured address forever."""
        host, port = _split_address(self.config.address)
        async with websockets.serve(self.handle_connection, host, port):
            await asyncio.Future()

    def on_connection(self, handler: PlayerHandler) -> PlayerHandler:
        """Set the handler called with each newly connected player."""
        self._connection_handler = handler
        return handler

    def on_disconnection(self, handler: PlayerHandler) -> PlayerHandler:
        """Set the handler called when a player disconnects; packets sent then do not arrive."""
        self._disconnection_handler = handler
        return handler

    async def handle_connection(self, connection: Any) -> None:
        """Serve one websocket connection until it closes or sends something unusable."""
        path = _request_path(connection)
        if path is not None and path != self.config.handler_pattern:
            logger.warning("connection on unknown path %s", path)
            await connection.close(1008, "unknown path")
            return

        player = Player(connection)
        self._players.add(player)
        sender = asyncio.ensure_future(player.send_packets())
        announced = False
        try:
            async for payload in connection:
                name_before = player.name
                try:
                    packet = decode_packet(payload)
                except ValueError as exc:
                    logger.warning("%s", exc)
                    break
                try:
                    player.handle_incoming_packet(packet)
                except PacketError as exc:
                    logger.warning("%s (payload: %s)", exc, payload)
                    break
                if name_before == "" and not announced:
                    announced = True
                    self._connection_handler(player)
        except ConnectionClosed as exc:
            logger.warning("error reading message from connection: %s", exc)
        finally:
            # The client keeps sending events across sessions unless unsubscribed.
            player.unsubscribe_from_all()
            self._disconnection_handler(player)
            self._players.discard(player)
            player.close()
            await sender
            await connection.close()