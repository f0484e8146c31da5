"""Typed access on top of ``read``.

``read_string`` and friends check the variant of the resolved value.
``read_deserialized`` converts it with a pydantic ``TypeAdapter``, and
``Partial`` binds a model class to one fixed location in the document.
"""

from __future__ import annotations

import datetime
from functools import lru_cache
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .errors import DeserializationError, TypeMismatchError
from .query.read import read
from .query.tokenizer import DEFAULT_SEPARATOR
from .value import BOOLEAN, DATETIME, FLOAT, INTEGER, STRING, TomlValue, kind_of

T = TypeVar("T")
P = TypeVar("P", bound="Partial")


def _read_kind(
    document: TomlValue, query: str, requested: str, separator: str
) -> TomlValue | None:
    value = read(document, query, separator)
    if value is None:
        return None
    actual = kind_of(value)
    if actual != requested:
        raise TypeMismatchError(requested, actual)
    return value


def read_string(
    document: TomlValue, query: str, separator: str = DEFAULT_SEPARATOR
) -> str | None:
    return _read_kind(document, query, STRING, separator)  # type: ignore[return-value]


def read_int(
    document: TomlValue, query: str, separator: str = DEFAULT_SEPARATOR
) -> int | None:
    return _read_kind(document, query, INTEGER, separator)  # type: ignore[return-value]


def read_float(
    document: TomlValue, query: str, separator: str = DEFAULT_SEPARATOR
) -> float | None:
    return _read_kind(document, query, FLOAT, separator)  # type: ignore[return-value]


def read_bool(
    document: TomlValue, query: str, separator: str = DEFAULT_SEPARATOR
) -> bool | None:
    return _read_kind(document, query, BOOLEAN, separator)  # type: ignore[return-value]


def read_datetime(
    document: TomlValue, query: str, separator: str = DEFAULT_SEPARATOR
) -> datetime.datetime | datetime.date | datetime.time | None:
    return _read_kind(document, query, DATETIME, separator)  # type: ignore[return-value]


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def read_deserialized(
    document: TomlValue,
    query: str,
    target: type[T],
    separator: str = DEFAULT_SEPARATOR,
) -> T | None:
    """Read ``query`` and validate the value as ``target``.

    Returns ``None`` when nothing is at ``query``. Validation failures raise
    ``DeserializationError`` chained to the pydantic ``ValidationError``.
    """

    value = read(document, query, separator)
    if value is None:
        return None
    try:
        return _adapter(target).validate_python(value)
    except ValidationError as exc:
        raise DeserializationError(query, target, str(exc)) from exc


class Partial(BaseModel):
    """A model that lives at a fixed ``LOCATION`` inside a document.

    Subclasses set ``LOCATION`` to a dotted path::

        class Server(Partial):
            LOCATION: ClassVar[str] = "server"

            host: str
            port: int = 8080
    """

    model_config = ConfigDict(extra="ignore")

    LOCATION: ClassVar[str]
    SEPARATOR: ClassVar[str] = DEFAULT_SEPARATOR


def read_partial(document: TomlValue, partial_type: type[P]) -> P | None:
    location = getattr(partial_type, "LOCATION", None)
    if not isinstance(location, str):
        raise TypeError(f"{partial_type.__name__} does not define a LOCATION")
    return read_deserialized(document, location, partial_type, partial_type.SEPARATOR)


__all__ = [
    "Partial",
    "read_bool",
    "read_datetime",
    "read_deserialized",
    "read_float",
    "read_int",
    "read_partial",
    "read_string",
]
