from __future__ import annotations

from ..errors import (
    ArrayIndexOutOfBoundsError,
    CannotDeleteNonEmptyArrayError,
    CannotDeleteNonEmptyTableError,
)
from ..runtime.logging import log_action
from ..value import TomlValue, is_non_empty_container
from .resolver import check_segment, resolve_mut
from .tokenizer import DEFAULT_SEPARATOR, Identifier, detach_last, tokenize


def _ensure_deletable(target: TomlValue, name: str | None) -> None:
    if not is_non_empty_container(target):
        return
    if isinstance(target, dict):
        raise CannotDeleteNonEmptyTableError(name)
    raise CannotDeleteNonEmptyArrayError(name)


def delete(
    document: TomlValue, query: str, separator: str = DEFAULT_SEPARATOR
) -> TomlValue | None:
    """Remove the value at ``query`` and return it.

    Only scalars and empty tables or arrays are removed; a non-empty container
    raises and the document is left untouched. Deleting a key that is not
    there returns ``None``. Every segment before the last must exist.
    """

    prefix, last = detach_last(tokenize(query, separator))
    parent = resolve_mut(document, prefix, strict=True)
    assert parent is not None
    check_segment(parent, last)

    removed: TomlValue | None
    if isinstance(parent, dict):
        assert isinstance(last, Identifier)
        if last.name not in parent:
            log_action("delete", "%s (missing)", query)
            return None
        _ensure_deletable(parent[last.name], last.name)
        removed = parent.pop(last.name)
    else:
        assert isinstance(parent, list) and not isinstance(last, Identifier)
        if last.position >= len(parent):
            raise ArrayIndexOutOfBoundsError(last.position, len(parent))
        _ensure_deletable(parent[last.position], None)
        removed = parent.pop(last.position)

    log_action("delete", "%s (removed)", query)
    return removed


__all__ = ["delete"]
