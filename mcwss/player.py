"""A player connected to the websocket server."""

from __future__ import annotations

import asyncio
import dataclasses
import json
import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from websockets.exceptions import ConnectionClosed

from mcwss.agent import Agent
from mcwss.command.chat import say_request, tell_raw_request, tell_request
from mcwss.command.client import (
    EduClientInfo,
    LocalPlayerName,
    close_chat_request,
    edu_client_info_request,
    local_player_name_request,
)
from mcwss.command.world import QueryTarget, query_target_request
from mcwss.event.measurements import Measurable
from mcwss.event.properties import Properties
from mcwss.event.registry import EVENTS, EventName, new_event
from mcwss.mctype import Position
from mcwss.protocol import (
    CommandResponse,
    ErrorResponse,
    EventResponse,
    Packet,
    new_command_request,
)
from mcwss.rawjson import decode
from mcwss.subscriptions import EventSubscriber
from mcwss.world import World, escape_message

logger = logging.getLogger(__name__)

_CLOSE = object()

Callback = Optional[Callable[[Any], Any]]


class PacketError(Exception):
    """Raised when a packet received from the client cannot be handled."""


def _format(message: str, args: tuple) -> str:
    return message % args if args else message


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _json_fields(value)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _json_fields(value: Any) -> Dict[str, Any]:
    return {
        field.metadata.get("json", field.name): _plain(getattr(value, field.name))
        for field in dataclasses.fields(value)
        if field.init
    }


def _as_mapping(data: Any) -> Mapping[str, Any]:
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError:
            return {}
    return data if isinstance(data, Mapping) else {}


def _log_differences(event: Any, properties: Properties, actual_data: Any) -> None:
    found = {**_json_fields(event), **_json_fields(properties)}
    actual = _as_mapping(actual_data)
    name = type(event).__name__
    for key in sorted(set(found) | set(actual)):
        if key in found and key in actual:
            if found[key] != actual[key]:
                logger.warning(
                    "diff in %s.%s: '%s' should be '%s'", name, key, found[key], actual[key]
                )
        elif key in found:
            logger.warning("diff in %s.%s: should not exist", name, key)
        else:
            logger.warning("diff in %s.%s: should be '%s'", name, key, actual[key])


class Player(EventSubscriber):
    """A player connected to the websocket server.

    Packets written to the player are queued and sent by ``send_packets``,
    which runs until the player is closed.
    """

    def __init__(self, connection: Any) -> None:
        self._packets: asyncio.Queue = asyncio.Queue()
        super().__init__(self.write_json)
        self._connection = connection
        self._debug = False
        self._name = ""
        self._connected = True
        self.properties = Properties()
        self._callbacks: Dict[str, Tuple[Callback, Optional[type]]] = {}
        self._callbacks_lock = threading.Lock()
        self.exec(local_player_name_request(), self._set_name, LocalPlayerName)
        self._agent = Agent(self)
        self._world = World(self)

    def _set_name(self, response: LocalPlayerName) -> None:
        self._name = response.local_player_name

    @property
    def name(self) -> str:
        """The name of the player; empty until the client has told it."""
        return self._name

    @property
    def agent(self) -> Agent:
        """The controllable agent entity of the player."""
        return self._agent

    @property
    def world(self) -> World:
        """The world the player is in."""
        return self._world

    @property
    def connected(self) -> bool:
        """Whether the player is still connected."""
        return self._connected

    @property
    def debug(self) -> bool:
        """Whether differences between received and decoded events are logged."""
        return self._debug

    def send_message(self, message: str, *args: Any) -> None:
        """Send a %-formatted message that only this player receives."""
        text = _format(escape_message(message), args)
        self.exec(tell_raw_request(self._name, text), None, None)

    def tell(self, message: str, *args: Any) -> None:
        """Send the player a %-formatted private message."""
        self.exec(tell_request(self._name, _format(message, args)), None, None)

    def say(self, message: str, *args: Any) -> None:
        """Broadcast a %-formatted message as the player to its world."""
        self.exec_as(say_request(_format(message, args)), None)

    def position(self, callback: Callable[[Position], Any]) -> None:
        """Request the player's position and pass it to ``callback`` once it arrives."""

        def receive(response: QueryTarget) -> None:
            if len(response.details) == 1:
                callback(response.details[0].position)

        self.exec(query_target_request(self._name), receive, QueryTarget)

    def edu_information(self, callback: Callable[[EduClientInfo], Any]) -> None:
        """Request education edition information about the player."""
        self.exec(edu_client_info_request(), callback, EduClientInfo)

    def close_chat(self) -> None:
        """Close the player's chat window if it is open."""
        self.exec(close_chat_request(), None, None)

    def exec(
        self,
        command_line: str,
        callback: Callback = None,
        response_type: Optional[type] = None,
    ) -> None:
        """Send a command line to the client.

        When the output arrives, ``callback`` receives it decoded into
        ``response_type``, or as a parsed JSON object if no type is given.
        Raises TypeError for a callback that is not callable.
        """
        if callback is not None and not callable(callback):
            raise TypeError(f"command callback must be callable, got {type(callback).__name__}")
        if response_type is not None and not isinstance(response_type, type):
            raise TypeError(f"response type must be a class, got {response_type!r}")
        packet = new_command_request("/" + command_line)
        with self._callbacks_lock:
            self._callbacks[packet.header.request_id] = (callback, response_type)
        self.write_json(packet)

    def exec_as(self, command_line: str, callback: Optional[Callable[[int], Any]] = None) -> None:
        """Execute a command as if the player sent it.

        The output goes to the player; ``callback`` only receives the status code.
        """

        def receive(response: Mapping[str, Any]) -> None:
            if "statusCode" not in response:
                logger.warning("exec as: invalid response JSON")
                return
            code = response["statusCode"]
            if isinstance(code, bool) or not isinstance(code, (int, float)):
                code = 0
            if callback is not None:
                callback(int(code))

        self.exec(f"execute {self._name} ~ ~ ~ {command_line}", receive, None)

    def enable_debug(self) -> None:
        """Log fields of events that were missing or decoded differently."""
        self._debug = True

    def close_connection(self) -> None:
        """Ask the client to close the websocket connection."""
        self.exec("closewebsocket", None, None)

    def unsubscribe_from_all(self) -> None:
        """Stop receiving every event subscribed to."""
        self._unsubscribe_all()

    def unsubscribe_from(self, event_name: Union[EventName, str]) -> None:
        """Stop receiving the event named; its handler is dropped."""
        self._unsubscribe(event_name)

    def write_json(self, packet: Any) -> None:
        """Queue a packet to be sent as JSON. Packets written after closing are dropped."""
        if self._connected:
            self._packets.put_nowait(packet)

    async def send_packets(self) -> None:
        """Send queued packets to the connection until the player is closed."""
        while True:
            packet = await self._packets.get()
            if packet is _CLOSE:
                return
            if isinstance(packet, Packet):
                data = packet.to_json()
            else:
                data = json.dumps(packet, separators=(",", ":"))
            try:
                await self._connection.send(data)
            except (ConnectionClosed, OSError) as exc:
                logger.debug("error writing packet: %s", exc)

    def close(self) -> None:
        """Mark the player disconnected; ``send_packets`` returns after sending what is queued."""
        if not self._connected:
            return
        self._connected = False
        self._packets.put_nowait(_CLOSE)

    def handle_incoming_packet(self, packet: Packet) -> None:
        """Process a packet received from the client.

        Raises PacketError for client errors, unknown packets, responses to
        unknown requests, malformed data and events nobody handles.
        """
        body = packet.body
        if isinstance(body, ErrorResponse):
            raise PacketError(
                f"a client side error occurred (code = {body.status_code}): {body.status_message}"
            )
        if isinstance(body, CommandResponse):
            self._handle_command_response(packet.header.request_id, body)
        elif isinstance(body, EventResponse):
            self._handle_event_response(body)
        else:
            raise PacketError(f"unknown packet {type(body).__name__}")

    def _handle_command_response(self, request_id: str, body: CommandResponse) -> None:
        with self._callbacks_lock:
            entry = self._callbacks.pop(request_id, None)
        if entry is None:
            raise PacketError(
                f"command response: got command response with unknown requestID {request_id}"
            )
        callback, response_type = entry
        if callback is None:
            return
        try:
            data = body.data
        except ValueError as exc:
            raise PacketError(f"command response: malformed response JSON {body.raw}: {exc}") from exc
        if response_type is None:
            if not isinstance(data, Mapping):
                raise PacketError(f"command response: malformed response JSON {body.raw}")
            callback(data)
            return
        try:
            response = decode(response_type, data)
        except (ValueError, TypeError) as exc:
            raise PacketError(
                f"command response: malformed response JSON {body.raw}: {exc}"
            ) from exc
        callback(response)

    def _handle_event_response(self, body: EventResponse) -> None:
        try:
            properties = decode(Properties, body.properties)
        except (ValueError, TypeError) as exc:
            raise PacketError(f"event response: malformed properties JSON: {exc}") from exc
        self.properties = properties

        try:
            name = EventName(str(body.event_name))
        except ValueError:
            raise PacketError(
                f"event response: unknown event with name {body.event_name}"
            ) from None
        try:
            event = new_event(name, body.properties)
        except (ValueError, TypeError):
            event = EVENTS[name]()

        if isinstance(event, Measurable):
            event.consume_measurements(body.measurements)

        if self._debug:
            _log_differences(event, properties, body.properties)

        handler = self._handler_for(name)
        if handler is None:
            raise PacketError(f"event response: unhandled event response for event {name}")
        handler(event)