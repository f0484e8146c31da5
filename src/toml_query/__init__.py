"""
toml-query: read and edit TOML documents through dotted paths.

This package uses a src-layout. Import the package as `toml_query`.
"""

from importlib.metadata import version

__version__ = version("toml-query")

from .codec import dump, dumps, load, loads
from .config import TOML_QUERY_CONFIG, TomlQueryConfig
from .document import TomlDocument
from .errors import (
    ArrayAccessWithInvalidIndexError,
    ArrayAccessWithoutIndexError,
    ArrayIndexOutOfBoundsError,
    CannotDeleteNonEmptyArrayError,
    CannotDeleteNonEmptyTableError,
    CannotExtendArrayError,
    DeserializationError,
    DocumentParseError,
    EmptyIdentifierError,
    EmptyQueryError,
    IdentifierNotFoundInDocumentError,
    IndexOutOfBoundsError,
    InvalidValueError,
    NoIdentifierInArrayError,
    NoIndexInTableError,
    QueryParseError,
    QueryTypeError,
    QueryingValueAsArrayError,
    QueryingValueAsTableError,
    TomlQueryError,
    TypeMismatchError,
)
from .query import (
    DEFAULT_SEPARATOR,
    Identifier,
    Index,
    Token,
    delete,
    detach_last,
    insert,
    read,
    read_mut,
    set_value,
    tokenize,
)
from .runtime import configure_logging, get_logger
from .typed import (
    Partial,
    read_bool,
    read_datetime,
    read_deserialized,
    read_float,
    read_int,
    read_partial,
    read_string,
)
from .value import TomlValue, kind_of

__all__ = [
    "__version__",
    "ArrayAccessWithInvalidIndexError",
    "ArrayAccessWithoutIndexError",
    "ArrayIndexOutOfBoundsError",
    "CannotDeleteNonEmptyArrayError",
    "CannotDeleteNonEmptyTableError",
    "CannotExtendArrayError",
    "DEFAULT_SEPARATOR",
    "DeserializationError",
    "DocumentParseError",
    "EmptyIdentifierError",
    "EmptyQueryError",
    "IdentifierNotFoundInDocumentError",
    "Identifier",
    "Index",
    "IndexOutOfBoundsError",
    "InvalidValueError",
    "NoIdentifierInArrayError",
    "NoIndexInTableError",
    "Partial",
    "QueryParseError",
    "QueryTypeError",
    "QueryingValueAsArrayError",
    "QueryingValueAsTableError",
    "TOML_QUERY_CONFIG",
    "Token",
    "TomlDocument",
    "TomlQueryConfig",
    "TomlQueryError",
    "TomlValue",
    "TypeMismatchError",
    "configure_logging",
    "delete",
    "detach_last",
    "dump",
    "dumps",
    "get_logger",
    "insert",
    "kind_of",
    "load",
    "loads",
    "read",
    "read_bool",
    "read_datetime",
    "read_deserialized",
    "read_float",
    "read_int",
    "read_mut",
    "read_partial",
    "read_string",
    "set_value",
    "tokenize",
]
