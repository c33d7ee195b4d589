"""Commands that query and change the world: particles, targets and blocks."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Mapping, Union

from mcwss.mctype import BlockPosition, Position, Target
from mcwss.rawjson import decode, json_field

TargetLike = Union[Target, str]


def _format_number(value: float) -> str:
    """Format a float the way the game expects: shortest digits, exponent past 1e+06."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    count = len(digits)
    point = count + exponent
    decimal_exponent = point - 1
    prefix = "-" if sign else ""
    if decimal_exponent < -4 or decimal_exponent >= 6:
        mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
        exponent_sign = "+" if decimal_exponent >= 0 else "-"
        return f"{prefix}{mantissa}e{exponent_sign}{abs(decimal_exponent):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= count:
        return f"{prefix}{digits}{'0' * (point - count)}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def particle_request(particle: str, position: Position) -> str:
    """The command that spawns a particle at a position."""
    coordinates = " ".join(_format_number(v) for v in (position.x, position.y, position.z))
    return f"particle {particle} {coordinates}"


@dataclass
class Particle:
    """Response to spawning a particle. The status code is always non-zero."""

    status_code: int = json_field("statusCode", 0, int)


def query_target_request(target: TargetLike) -> str:
    """The command that queries information about a target."""
    return f"querytarget {target}"


@dataclass
class QueryResult:
    """Details of one entity matching a target query."""

    dimension: int = json_field("dimension", 0, int)
    position: Position = json_field("position", Position(), Position.from_dict)
    unique_id: str = json_field("uniqueId", "", str)
    y_rotation: float = json_field("yRot", 0.0, float)


def parse_query_results(data: Any) -> List[QueryResult]:
    """Parse the details of a query target response.

    The client sends the details as an escaped JSON string rather than an
    array. Newlines, backslashes and spaces are removed before the text is
    parsed. A list that is already parsed is accepted too. Raises ValueError
    when the details cannot be read as a list of results.
    """
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    if isinstance(data, str):
        cleaned = (
            data.replace("\\n", "")
            .replace("\n", "")
            .replace("\\", "")
            .replace(" ", "")
            .strip('"')
        )
        try:
            items = json.loads(cleaned)
        except ValueError as exc:
            raise ValueError(f"malformed query results {data!r}: {exc}") from exc
    else:
        items = data
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValueError(f"query results must be a list, got {type(items).__name__}")
    results = []
    for item in items:
        if item is not None and not isinstance(item, Mapping):
            raise ValueError(f"query result must be an object, got {item!r}")
        results.append(decode(QueryResult, item))
    return results


@dataclass
class QueryTarget:
    """Response holding details about every entity matching a query."""

    details: List[QueryResult] = json_field("details", [], parse_query_results)
    status_code: int = json_field("statusCode", 0, int)
    status_message: str = json_field("statusMessage", "", str)


def set_block_request(
    position: BlockPosition, block: str, tile_data: int, placement_method: str
) -> str:
    """The command that places a block.

    The placement method is one of 'replace', 'destroy' and 'keep'. The tile
    data must fit in a byte; otherwise ValueError is raised.
    """
    if not 0 <= tile_data <= 255:
        raise ValueError(f"tile data {tile_data} does not fit in a byte")
    return (
        f"setblock {position.x} {position.y} {position.z} "
        f"{block} {tile_data} {placement_method}"
    )


@dataclass
class SetBlock:
    """Response to placing a block."""

    position: Position = json_field("position", Position(), Position.from_dict)
    status_message: str = json_field("statusMessage", "", str)
    status_code: int = json_field("statusCode", 0, int)


def top_solid_block_request(x: int, z: int, max_y: int) -> str:
    """The command that finds the top solid block below a height at a column."""
    return f"gettopsolidblock {x} {max_y} {z}"


@dataclass
class TopSolidBlock:
    """Response naming the top solid block of a column and its position."""

    block: str = json_field("blockName", "", str)
    aux_type: int = json_field("blockData", 0, int)
    position: BlockPosition = json_field("position", BlockPosition(), BlockPosition.from_dict)
    status_code: int = json_field("statusCode", 0, int)