from .delete import delete
from .read import read, read_mut
from .resolver import (
    check_segment,
    placeholder_for,
    resolve_creating,
    resolve_mut,
    resolve_read,
)
from .tokenizer import (
    DEFAULT_SEPARATOR,
    Identifier,
    Index,
    Token,
    Tokens,
    detach_last,
    format_path,
    tokenize,
)
from .update import insert, set_value

__all__ = [
    "DEFAULT_SEPARATOR",
    "Identifier",
    "Index",
    "Token",
    "Tokens",
    "check_segment",
    "delete",
    "detach_last",
    "format_path",
    "insert",
    "placeholder_for",
    "read",
    "read_mut",
    "resolve_creating",
    "resolve_mut",
    "resolve_read",
    "set_value",
    "tokenize",
]
