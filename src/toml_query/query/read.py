from __future__ import annotations

from ..runtime.logging import log_action
from ..value import TomlValue
from .resolver import resolve_mut, resolve_read
from .tokenizer import DEFAULT_SEPARATOR, tokenize


def read(
    document: TomlValue, query: str, separator: str = DEFAULT_SEPARATOR
) -> TomlValue | None:
    """Return the value at ``query`` or ``None`` when nothing is there.

    A missing key or an index past the end of an array is not an error; using
    an index on a table, a key on an array or descending into a scalar is.
    """

    result = resolve_read(document, tokenize(query, separator))
    log_action("read", "%s (%s)", query, "missing" if result is None else "found")
    return result


def read_mut(
    document: TomlValue, query: str, separator: str = DEFAULT_SEPARATOR
) -> TomlValue | None:
    """Like ``read``, for callers that mutate the returned table or array in place."""

    result = resolve_mut(document, tokenize(query, separator))
    log_action("read", "%s mutably (%s)", query, "missing" if result is None else "found")
    return result


__all__ = ["read", "read_mut"]
