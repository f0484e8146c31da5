"""Path tokenizer: query string to an ordered tuple of segments."""

from __future__ import annotations

import re
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from ..errors import (
    ArrayAccessWithInvalidIndexError,
    ArrayAccessWithoutIndexError,
    EmptyIdentifierError,
    EmptyQueryError,
)

DEFAULT_SEPARATOR = "."

_INDEX_RE = re.compile(r"\[([0-9]+)\]")


class _TokenNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class Identifier(_TokenNode):
    kind: Literal["identifier"] = "identifier"
    name: str = Field(min_length=1)

    def __str__(self) -> str:
        return self.name


class Index(_TokenNode):
    kind: Literal["index"] = "index"
    position: int = Field(ge=0)

    def __str__(self) -> str:
        return f"[{self.position}]"


Token: TypeAlias = Annotated[Identifier | Index, Field(discriminator="kind")]
Tokens: TypeAlias = tuple[Token, ...]


def tokenize(query: str, separator: str = DEFAULT_SEPARATOR) -> Tokens:
    """Split ``query`` on ``separator`` into identifier and index segments.

    A segment of the form ``[N]`` (ASCII digits only) is an index; any other
    non-empty segment is an identifier taken verbatim.
    """

    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    if not query:
        raise EmptyQueryError()

    tokens: list[Token] = []
    for segment in query.split(separator):
        if not segment:
            raise EmptyIdentifierError(query)
        tokens.append(_make_token(segment))
    return tuple(tokens)


def _make_token(segment: str) -> Token:
    if not (segment.startswith("[") or segment.endswith("]")):
        return Identifier(name=segment)

    match = _INDEX_RE.fullmatch(segment)
    if match is not None:
        return Index(position=int(match.group(1)))
    if segment == "[]":
        raise ArrayAccessWithoutIndexError(segment)
    raise ArrayAccessWithInvalidIndexError(segment)


def detach_last(tokens: Tokens) -> tuple[Tokens, Token]:
    """Split a non-empty token sequence into ``(prefix, last)``."""

    if not tokens:
        raise ValueError("cannot detach the last segment of an empty path")
    return tokens[:-1], tokens[-1]


def format_path(tokens: Tokens, separator: str = DEFAULT_SEPARATOR) -> str:
    return separator.join(str(token) for token in tokens)


__all__ = [
    "DEFAULT_SEPARATOR",
    "Identifier",
    "Index",
    "Token",
    "Tokens",
    "detach_last",
    "format_path",
    "tokenize",
]
