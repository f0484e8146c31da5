"""Convert between TOML text and documents."""

from __future__ import annotations

import tomllib
from pathlib import Path

import tomlkit

from .errors import DocumentParseError, InvalidValueError
from .value import TomlTable


def loads(text: str) -> TomlTable:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise DocumentParseError(f"invalid TOML document: {exc}") from exc


def load(path: str | Path) -> TomlTable:
    path = Path(path)
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise DocumentParseError(f"invalid TOML document {path}: {exc}") from exc


def dumps(document: TomlTable) -> str:
    """Serialize a document; the root must be a table."""

    if not isinstance(document, dict):
        raise InvalidValueError(document)
    return tomlkit.dumps(document)


def dump(document: TomlTable, path: str | Path) -> None:
    Path(path).write_text(dumps(document), encoding="utf-8")


__all__ = ["dump", "dumps", "load", "loads"]
