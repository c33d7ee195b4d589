"""Decoding of raw JSON objects, such as command responses, into dataclasses."""

from __future__ import annotations

import copy
import dataclasses
import json
from typing import Any, Callable, Mapping, Optional, Type, TypeVar

T = TypeVar("T")


def json_field(key: str, default: Any = None, convert: Optional[Callable[[Any], Any]] = None) -> Any:
    """Declare a dataclass field read from the JSON key given.

    A value that is missing or null leaves the default in place. A value that
    is present is passed through ``convert`` when one is given.
    """
    metadata = {"json": key, "convert": convert}
    if isinstance(default, (list, dict, set)):
        template = default
        return dataclasses.field(default_factory=lambda: copy.deepcopy(template), metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def decode(cls: Type[T], data: Any) -> T:
    """Decode a JSON document (text, bytes or an already parsed object) into ``cls``.

    Keys are matched exactly first and case-insensitively otherwise. Raises
    ValueError for malformed JSON, for JSON that is not an object and for
    values that cannot be converted.
    """
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise ValueError(f"malformed JSON for {cls.__name__}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"cannot decode JSON {type(data).__name__} into {cls.__name__}")

    folded: dict = {}
    for key, value in data.items():
        folded.setdefault(str(key).casefold(), value)

    values = {}
    for field in dataclasses.fields(cls):
        if not field.init:
            continue
        key = field.metadata.get("json", field.name)
        value = data[key] if key in data else folded.get(key.casefold())
        if value is None:
            continue
        convert = field.metadata.get("convert")
        if convert is not None:
            try:
                value = convert(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"field {key!r} of {cls.__name__}: {exc}") from exc
        values[field.name] = value
    return cls(**values)