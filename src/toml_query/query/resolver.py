"""Walk a document along a token sequence.

All strategies share one loop. ``create`` fabricates missing tables, ``strict``
turns absence into an error instead of ``None``. Python has no shared/exclusive
reference split, so the read-only and mutable strategies return the same live
object; they differ only in intent.
"""

from __future__ import annotations

from ..errors import (
    CannotExtendArrayError,
    IdentifierNotFoundInDocumentError,
    IndexOutOfBoundsError,
    NoIdentifierInArrayError,
    NoIndexInTableError,
    QueryingValueAsArrayError,
    QueryingValueAsTableError,
)
from ..value import TomlArray, TomlTable, TomlValue, kind_of
from .tokenizer import Identifier, Index, Token, Tokens

Created = list[tuple[TomlTable, str]]


def placeholder_for(next_token: Token) -> TomlTable | TomlArray:
    """Container a path needs at a position it does not reach yet.

    An identifier can only be looked up in a table and an index only in an
    array, so the kind of the following segment decides.
    """

    if isinstance(next_token, Identifier):
        return {}
    return []


def check_segment(parent: TomlValue, token: Token) -> None:
    """Raise if ``token`` cannot address a child of ``parent``."""

    if isinstance(parent, dict):
        if isinstance(token, Index):
            raise NoIndexInTableError(token.position)
    elif isinstance(parent, list):
        if isinstance(token, Identifier):
            raise NoIdentifierInArrayError(token.name)
    elif isinstance(token, Identifier):
        raise QueryingValueAsTableError(token.name)
    else:
        raise QueryingValueAsArrayError(token.position)


def _walk(
    root: TomlValue,
    tokens: Tokens,
    *,
    create: bool,
    strict: bool,
    last: Token | None = None,
    created: Created | None = None,
) -> TomlValue | None:
    current = root
    for position, token in enumerate(tokens):
        check_segment(current, token)

        if isinstance(current, dict):
            assert isinstance(token, Identifier)
            if token.name not in current:
                if create:
                    current[token.name] = {}
                    if created is not None:
                        created.append((current, token.name))
                elif strict:
                    raise IdentifierNotFoundInDocumentError(token.name)
                else:
                    return None
            current = current[token.name]
        else:
            assert isinstance(current, list) and isinstance(token, Index)
            if token.position >= len(current):
                if create:
                    following = (
                        tokens[position + 1] if position + 1 < len(tokens) else last
                    )
                    kind = (
                        kind_of(placeholder_for(following))
                        if following is not None
                        else None
                    )
                    raise CannotExtendArrayError(token.position, len(current), kind)
                if strict:
                    raise IndexOutOfBoundsError(token.position, len(current))
                return None
            current = current[token.position]

    return current


def resolve_read(root: TomlValue, tokens: Tokens) -> TomlValue | None:
    """Return the value addressed by ``tokens`` or ``None`` if it is absent."""

    return _walk(root, tokens, create=False, strict=False)


def resolve_mut(
    root: TomlValue, tokens: Tokens, *, strict: bool = False
) -> TomlValue | None:
    """Return the live value addressed by ``tokens`` for in-place mutation.

    With ``strict`` a missing key or index raises instead of returning ``None``.
    """

    return _walk(root, tokens, create=False, strict=strict)


def resolve_creating(
    root: TomlValue,
    tokens: Tokens,
    *,
    last: Token | None = None,
    created: Created | None = None,
) -> TomlValue:
    """Return the value addressed by ``tokens``, creating missing tables.

    ``last`` is the segment the caller will apply to the result; it only
    informs the error raised when an array would have to grow. Every table
    created is appended to ``created`` as ``(parent, key)``.
    """

    resolved = _walk(root, tokens, create=True, strict=True, last=last, created=created)
    assert resolved is not None
    return resolved


def rollback(created: Created) -> None:
    """Undo tables recorded by ``resolve_creating``.

    Later tables are nested in the first one, so dropping it removes them all.
    """

    if created:
        parent, key = created[0]
        del parent[key]


__all__ = [
    "Created",
    "check_segment",
    "placeholder_for",
    "resolve_creating",
    "resolve_mut",
    "resolve_read",
    "rollback",
]
