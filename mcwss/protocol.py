"""The JSON packets exchanged between the client and the server."""

from __future__ import annotations

import dataclasses
import json
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union

from mcwss.event.measurements import Measurements
from mcwss.event.registry import EventName
from mcwss.rawjson import decode, json_field


class MessagePurpose(str, Enum):
    """The purpose a JSON message was sent for."""

    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"
    EVENT = "event"
    ERROR = "error"
    COMMAND = "commandRequest"
    RESPONSE = "commandResponse"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    return value


def _to_event_name(value: Any) -> Union[EventName, str]:
    text = _to_str(value)
    try:
        return EventName(text)
    except ValueError:
        return text


def _to_measurements(value: Any) -> Measurements:
    return decode(Measurements, value)


def _encode(value: Any) -> Any:
    if isinstance(value, CommandResponse):
        return value.data
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.metadata.get("json", field.name): _encode(getattr(value, field.name))
            for field in dataclasses.fields(value)
            if field.init
        }
    if isinstance(value, Mapping):
        return {str(key): _encode(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


@dataclass
class Header:
    """The header every packet shares."""

    request_id: str = json_field("requestId", "", _to_str)
    message_purpose: Union[MessagePurpose, str] = json_field("messagePurpose", "", _to_str)
    version: int = json_field("version", 0, _to_int)

    def to_dict(self) -> dict:
        return _encode(self)


@dataclass
class CommandRequest:
    """A raw command line for the client to execute."""

    command_line: str = json_field("commandLine", "", _to_str)
    version: int = json_field("version", 0, _to_int)


@dataclass
class EventRequest:
    """Asks the client to start or stop sending an event."""

    event_name: Union[EventName, str] = json_field("eventName", "", _to_event_name)


@dataclass
class EventResponse:
    """An event sent by the client, with its measurements and properties."""

    event_name: Union[EventName, str] = json_field("eventName", "", _to_event_name)
    measurements: Measurements = dataclasses.field(
        default_factory=Measurements,
        metadata={"json": "measurements", "convert": _to_measurements},
    )
    # Holds the properties shared by all events as well as the event's own.
    properties: Any = json_field("properties", {})


@dataclass
class ErrorResponse:
    """Sent by the client when an error occurs while communicating."""

    status_message: str = json_field("statusMessage", "", _to_str)
    status_code: int = json_field("statusCode", 0, _to_int)


@dataclass(frozen=True)
class CommandResponse:
    """The output of a command, kept as raw JSON since its shape depends on the command."""

    raw: str = "null"

    @property
    def data(self) -> Any:
        """The parsed JSON of the response."""
        return json.loads(self.raw)


PACKETS: Dict[MessagePurpose, type] = {
    MessagePurpose.SUBSCRIBE: EventRequest,
    MessagePurpose.UNSUBSCRIBE: EventRequest,
    MessagePurpose.EVENT: EventResponse,
    MessagePurpose.ERROR: ErrorResponse,
    MessagePurpose.RESPONSE: CommandResponse,
    MessagePurpose.COMMAND: CommandRequest,
}


@dataclass
class Packet:
    """A packet: a shared header and a body that depends on its purpose."""

    header: Header
    body: Any = None

    def to_dict(self) -> dict:
        return {"header": self.header.to_dict(), "body": _encode(self.body)}

    def to_json(self) -> str:
        """The packet as compact JSON text, ready to be sent."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


def _new_header(purpose: MessagePurpose) -> Header:
    return Header(request_id=str(uuid.uuid4()), message_purpose=purpose, version=1)


def new_command_request(command_line: str) -> Packet:
    """A packet asking the client to execute a command line."""
    return Packet(
        header=_new_header(MessagePurpose.COMMAND),
        body=CommandRequest(command_line=command_line, version=1),
    )


def new_event_request(event_name: Union[EventName, str], purpose: MessagePurpose) -> Packet:
    """A packet subscribing to or unsubscribing from an event."""
    return Packet(header=_new_header(purpose), body=EventRequest(event_name=event_name))


def _lookup(document: Mapping[str, Any], key: str) -> Any:
    if key in document:
        return document[key]
    for name, value in document.items():
        if str(name).casefold() == key:
            return value
    return None


def decode_packet(payload: Union[str, bytes, bytearray]) -> Packet:
    """Decode a packet received from the client.

    The body is decoded into the class that belongs to the message purpose.
    Raises ValueError for malformed JSON, an unknown message purpose or a
    body that does not fit its purpose.
    """
    try:
        document = json.loads(payload)
    except ValueError as exc:
        raise ValueError(f"malformed packet JSON: {exc}") from exc
    if not isinstance(document, Mapping):
        raise ValueError(f"malformed packet JSON: expected an object, got {type(document).__name__}")

    header = decode(Header, _lookup(document, "header"))
    try:
        purpose = MessagePurpose(header.message_purpose)
    except ValueError:
        raise ValueError(f"unknown message purpose {header.message_purpose}") from None
    header.message_purpose = purpose

    body_data = _lookup(document, "body")
    body_class = PACKETS[purpose]
    if body_class is CommandResponse:
        body: Any = CommandResponse(json.dumps(body_data, separators=(",", ":")))
    else:
        try:
            body = decode(body_class, body_data)
        except ValueError as exc:
            raise ValueError(f"map to struct conversion failed: {exc}") from exc
    return Packet(header=header, body=body)