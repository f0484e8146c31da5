"""TOML value model.

Documents are plain Python objects, exactly as ``tomllib`` produces them. This
module only names the variants; it has no behavior beyond identifying them.
"""

from __future__ import annotations

import datetime
from typing import TypeAlias

from .errors import InvalidValueError

TomlDatetime: TypeAlias = datetime.datetime | datetime.date | datetime.time
TomlScalar: TypeAlias = str | int | float | bool | TomlDatetime
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]
TomlArray: TypeAlias = list[TomlValue]

TABLE = "Table"
ARRAY = "Array"
STRING = "String"
INTEGER = "Integer"
FLOAT = "Float"
BOOLEAN = "Boolean"
DATETIME = "Datetime"


def kind_of(value: object) -> str:
    """Return the variant name of ``value``.

    Raises ``InvalidValueError`` for objects that are not TOML values.
    """

    # bool is an int subclass, so it must be checked first.
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, int):
        return INTEGER
    if isinstance(value, float):
        return FLOAT
    if isinstance(value, str):
        return STRING
    if isinstance(value, dict):
        return TABLE
    if isinstance(value, list):
        return ARRAY
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return DATETIME
    raise InvalidValueError(value)


def ensure_value(value: object) -> TomlValue:
    kind_of(value)
    return value  # type: ignore[return-value]


def is_non_empty_container(value: object) -> bool:
    if isinstance(value, (dict, list)):
        return len(value) > 0
    return False


__all__ = [
    "ARRAY",
    "BOOLEAN",
    "DATETIME",
    "FLOAT",
    "INTEGER",
    "STRING",
    "TABLE",
    "TomlArray",
    "TomlDatetime",
    "TomlScalar",
    "TomlTable",
    "TomlValue",
    "ensure_value",
    "is_non_empty_container",
    "kind_of",
]
