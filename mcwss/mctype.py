"""Basic value types shared by commands and events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Mapping, Optional


class _StrEnum(str, Enum):
    """String enumeration that formats as its plain value."""

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


class Direction(_StrEnum):
    """A readable direction used in agent commands."""

    FORWARD = "forward"
    BACK = "back"
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"


class ArmourSlot(IntEnum):
    """An inventory slot that armour may be put in."""

    HELMET = 2
    CHESTPLATE = 3
    LEGGINGS = 4
    BOOTS = 5


class Target(_StrEnum):
    """A target selector in a command. It may resolve to several entities."""

    ALL_PLAYERS = "@a"
    ALL_ENTITIES = "@e"
    NEAREST_PLAYER = "@p"
    RANDOM_PLAYER = "@r"
    SELF = "@s"


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    return value


def _read(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key)
    return 0 if value is None else value


@dataclass(frozen=True)
class Position:
    """The position of an entity in a 3D world."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Position":
        """Build a position from a JSON object; missing coordinates are 0."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"expected a JSON object for a position, got {data!r}")
        return cls(
            x=_to_float(_read(data, "x")),
            y=_to_float(_read(data, "y")),
            z=_to_float(_read(data, "z")),
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class BlockPosition:
    """The position of a block in a 3D world."""

    x: int = 0
    y: int = 0
    z: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "BlockPosition":
        """Build a block position from a JSON object; missing coordinates are 0."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"expected a JSON object for a block position, got {data!r}")
        return cls(
            x=_to_int(_read(data, "x")),
            y=_to_int(_read(data, "y")),
            z=_to_int(_read(data, "z")),
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}