"""Write operations: ``set_value`` replaces, ``insert`` creates.

Both resolve the path without its last segment to find the parent container,
then apply the last segment to that parent. They differ in how the parent is
found and in what an array index means.
"""

from __future__ import annotations

from ..errors import ArrayIndexOutOfBoundsError, TomlQueryError
from ..runtime.logging import log_action
from ..value import TomlValue, ensure_value
from .resolver import Created, check_segment, resolve_creating, resolve_mut, rollback
from .tokenizer import DEFAULT_SEPARATOR, Identifier, detach_last, tokenize


def set_value(
    document: TomlValue,
    query: str,
    value: TomlValue,
    separator: str = DEFAULT_SEPARATOR,
) -> TomlValue | None:
    """Store ``value`` at ``query`` and return the value it replaced.

    Every segment before the last must already exist. On a table the key is
    added or replaced; on an array the index must already exist.
    """

    ensure_value(value)
    prefix, last = detach_last(tokenize(query, separator))
    parent = resolve_mut(document, prefix, strict=True)
    assert parent is not None
    check_segment(parent, last)

    previous: TomlValue | None
    if isinstance(parent, dict):
        assert isinstance(last, Identifier)
        previous = parent.get(last.name)
        parent[last.name] = value
    else:
        assert isinstance(parent, list) and not isinstance(last, Identifier)
        if last.position >= len(parent):
            raise ArrayIndexOutOfBoundsError(last.position, len(parent))
        previous = parent[last.position]
        parent[last.position] = value

    log_action("set", "%s (%s)", query, "added" if previous is None else "replaced")
    return previous


def insert(
    document: TomlValue,
    query: str,
    value: TomlValue,
    separator: str = DEFAULT_SEPARATOR,
) -> TomlValue | None:
    """Insert ``value`` at ``query``, creating missing tables on the way.

    On a table the key is added or replaced and the old value returned. On an
    array the value is inserted before the index, or appended when the index
    is past the end; nothing is displaced, so ``None`` is returned. A failed
    insert removes any table it created.
    """

    ensure_value(value)
    prefix, last = detach_last(tokenize(query, separator))

    created: Created = []
    try:
        parent = resolve_creating(document, prefix, last=last, created=created)
        check_segment(parent, last)
    except TomlQueryError:
        rollback(created)
        raise

    previous: TomlValue | None = None
    if isinstance(parent, dict):
        assert isinstance(last, Identifier)
        previous = parent.get(last.name)
        parent[last.name] = value
    else:
        assert isinstance(parent, list) and not isinstance(last, Identifier)
        # list.insert appends when the index is past the end.
        parent.insert(last.position, value)

    log_action("insert", "%s (created %d tables)", query, len(created))
    return previous


__all__ = ["insert", "set_value"]
