from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from . import codec, typed
from .query import delete, insert, read, read_mut, set_value
from .query.tokenizer import DEFAULT_SEPARATOR
from .value import TomlValue, ensure_value

T = TypeVar("T")
P = TypeVar("P", bound=typed.Partial)


class TomlDocument:
    """A TOML document with the query operations as methods.

    The wrapped ``root`` is the live tree; every method works on it in place.
    """

    __slots__ = ("root",)

    def __init__(self, root: TomlValue | None = None) -> None:
        self.root: TomlValue = {} if root is None else ensure_value(root)

    @classmethod
    def loads(cls, text: str) -> TomlDocument:
        return cls(codec.loads(text))

    @classmethod
    def load(cls, path: str | Path) -> TomlDocument:
        return cls(codec.load(path))

    def dumps(self) -> str:
        return codec.dumps(self.root)  # type: ignore[arg-type]

    def dump(self, path: str | Path) -> None:
        codec.dump(self.root, path)  # type: ignore[arg-type]

    def read(self, query: str, separator: str = DEFAULT_SEPARATOR) -> TomlValue | None:
        return read(self.root, query, separator)

    def read_mut(
        self, query: str, separator: str = DEFAULT_SEPARATOR
    ) -> TomlValue | None:
        return read_mut(self.root, query, separator)

    def set(
        self, query: str, value: TomlValue, separator: str = DEFAULT_SEPARATOR
    ) -> TomlValue | None:
        return set_value(self.root, query, value, separator)

    def insert(
        self, query: str, value: TomlValue, separator: str = DEFAULT_SEPARATOR
    ) -> TomlValue | None:
        return insert(self.root, query, value, separator)

    def delete(
        self, query: str, separator: str = DEFAULT_SEPARATOR
    ) -> TomlValue | None:
        return delete(self.root, query, separator)

    def read_string(self, query: str, separator: str = DEFAULT_SEPARATOR) -> str | None:
        return typed.read_string(self.root, query, separator)

    def read_int(self, query: str, separator: str = DEFAULT_SEPARATOR) -> int | None:
        return typed.read_int(self.root, query, separator)

    def read_float(
        self, query: str, separator: str = DEFAULT_SEPARATOR
    ) -> float | None:
        return typed.read_float(self.root, query, separator)

    def read_bool(self, query: str, separator: str = DEFAULT_SEPARATOR) -> bool | None:
        return typed.read_bool(self.root, query, separator)

    def read_datetime(self, query: str, separator: str = DEFAULT_SEPARATOR):
        return typed.read_datetime(self.root, query, separator)

    def read_deserialized(
        self, query: str, target: type[T], separator: str = DEFAULT_SEPARATOR
    ) -> T | None:
        return typed.read_deserialized(self.root, query, target, separator)

    def read_partial(self, partial_type: type[P]) -> P | None:
        return typed.read_partial(self.root, partial_type)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TomlDocument):
            return self.root == other.root
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TomlDocument({self.root!r})"


__all__ = ["TomlDocument"]
