"""The education edition command that reads the top blocks of a chunk."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

from mcwss.rawjson import json_field

_INTEGER = re.compile(r"[+-]?[0-9]+")


def chunk_data_request(dimension: str, chunk_x: int, chunk_z: int, max_y: int) -> str:
    """The command that requests the chunk data of a chunk."""
    return f"getchunkdata {dimension} {chunk_x} {chunk_z} {max_y}"


@dataclass
class ChunkData:
    """Response holding the compressed colour and height string of a chunk."""

    data: str = json_field("data", "", str)
    status_code: int = json_field("statusCode", 0, int)
    status_message: str = json_field("statusMessage", "", str)


class Colour(NamedTuple):
    """An RGBA colour of a block."""

    r: int
    g: int
    b: int
    a: int = 0


def _integer(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


def _expand(data: str) -> List[str]:
    values: List[str] = []
    for fragment in data.split(","):
        parts = fragment.split("*")
        multiplier = 1
        if len(parts) == 2:
            # The multiplier counts the repeats after the first occurrence.
            multiplier = _integer(parts[1]) + 1
        value = parts[0]
        if _INTEGER.fullmatch(value):
            pointer = int(value)
            if not 0 <= pointer < len(values):
                raise ValueError(f"chunk data pointer {pointer} out of range")
            value = values[pointer]
        values.extend([value] * max(multiplier, 0))
    return values


def _decode_value(value: str) -> bytes:
    if "=" in value:
        raise ValueError(f"unexpected padding in chunk data value {value!r}")
    try:
        raw = base64.b64decode(value + "=" * (-len(value) % 4), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid chunk data value {value!r}: {exc}") from exc
    if len(raw) < 4:
        raise ValueError(f"chunk data value {value!r} holds fewer than 4 bytes")
    return raw


def parse_chunk_data(data: str) -> Tuple[List[Colour], bytes]:
    """Parse a chunk data string into colours and heights, both in XZ order.

    Raises ValueError when the string is malformed.
    """
    colours: List[Colour] = []
    heights = bytearray()
    for value in _expand(data):
        raw = _decode_value(value)
        colours.append(Colour(r=raw[2], g=raw[1], b=raw[0]))
        heights.append(raw[3])
    return colours, bytes(heights)