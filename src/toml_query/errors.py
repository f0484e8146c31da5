"""Exception hierarchy for toml-query.

Every failure raised by the package derives from ``TomlQueryError``. Errors keep
the offending segment (or index/length pair) as attributes so callers can react
without parsing messages.
"""

from __future__ import annotations


class TomlQueryError(Exception):
    """Base class for all toml-query errors."""


# Tokenizer


class QueryParseError(TomlQueryError, ValueError):
    """Raised when a query string cannot be tokenized."""


class EmptyQueryError(QueryParseError):
    def __init__(self) -> None:
        super().__init__("The query on the TOML is empty")


class EmptyIdentifierError(QueryParseError):
    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"The passed query {query!r} has an empty identifier")


class ArrayAccessWithoutIndexError(QueryParseError):
    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(
            "The passed query tries to access an array but does not specify the index"
        )


class ArrayAccessWithInvalidIndexError(QueryParseError):
    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(
            "The passed query tries to access an array but does not specify a "
            f"valid index: {segment!r}"
        )


# Resolver


class QueryTypeError(TomlQueryError, TypeError):
    """Raised when a segment kind does not match the value it is applied to."""


class NoIndexInTableError(QueryTypeError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Got an index query '[{index}]' but have table")


class NoIdentifierInArrayError(QueryTypeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Got an identifier query '{name}' but have array")


class QueryingValueAsTableError(QueryTypeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Got an identifier query '{name}' but have value")


class QueryingValueAsArrayError(QueryTypeError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Got an index query '[{index}]' but have value")


class IdentifierNotFoundInDocumentError(TomlQueryError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The identifier '{name}' is not present in the document")


class IndexOutOfBoundsError(TomlQueryError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Cannot access array at {index}, array has length {length}")


class CannotExtendArrayError(TomlQueryError, IndexError):
    """Raised when a path would need a new element appended to an array.

    ``placeholder_kind`` names the container ("Table" or "Array") that would have
    to be created at ``index``, or ``None`` when no further segment decides it.
    """

    def __init__(self, index: int, length: int, placeholder_kind: str | None) -> None:
        self.index = index
        self.length = length
        self.placeholder_kind = placeholder_kind
        target = placeholder_kind or "container"
        super().__init__(
            f"Cannot create a {target} at index {index} in array of length {length}; "
            "extending arrays through intermediate segments is not supported"
        )


# Operations


class CannotDeleteNonEmptyTableError(TomlQueryError):
    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"cannot delete non-empty table {name!r}")


class CannotDeleteNonEmptyArrayError(TomlQueryError):
    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"cannot delete non-empty array {name!r}")


class ArrayIndexOutOfBoundsError(TomlQueryError, IndexError):
    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"array index out of bounds ({index}, {length})")


# Values and conversion


class InvalidValueError(TomlQueryError, TypeError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"unsupported TOML value type {type(value).__name__}")


class TypeMismatchError(TomlQueryError, TypeError):
    def __init__(self, requested: str, actual: str) -> None:
        self.requested = requested
        self.actual = actual
        super().__init__(f"Type Error. Requested {requested}, but got {actual}")


class DeserializationError(TomlQueryError):
    """Raised when a resolved value cannot be converted to the requested type."""

    def __init__(self, query: str, target: object, detail: str) -> None:
        self.query = query
        self.target = target
        target_name = getattr(target, "__name__", repr(target))
        super().__init__(
            f"cannot convert value at {query!r} to {target_name}: {detail}"
        )


class DocumentParseError(TomlQueryError, ValueError):
    """Raised when TOML text cannot be parsed into a document."""


__all__ = [
    "ArrayAccessWithInvalidIndexError",
    "ArrayAccessWithoutIndexError",
    "ArrayIndexOutOfBoundsError",
    "CannotDeleteNonEmptyArrayError",
    "CannotDeleteNonEmptyTableError",
    "CannotExtendArrayError",
    "DeserializationError",
    "DocumentParseError",
    "EmptyIdentifierError",
    "EmptyQueryError",
    "IdentifierNotFoundInDocumentError",
    "IndexOutOfBoundsError",
    "InvalidValueError",
    "NoIdentifierInArrayError",
    "NoIndexInTableError",
    "QueryParseError",
    "QueryTypeError",
    "QueryingValueAsArrayError",
    "QueryingValueAsTableError",
    "TomlQueryError",
    "TypeMismatchError",
]
