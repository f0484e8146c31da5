"""Tests for delete."""

import copy

import pytest

from toml_query import delete, loads, read
from toml_query.errors import (
    ArrayIndexOutOfBoundsError,
    CannotDeleteNonEmptyArrayError,
    CannotDeleteNonEmptyTableError,
    IdentifierNotFoundInDocumentError,
    NoIdentifierInArrayError,
    NoIndexInTableError,
    QueryingValueAsTableError,
)


def test_delete_from_empty_document() -> None:
    assert delete(loads(""), "a") is None


def test_delete_from_empty_table() -> None:
    doc = loads("[table]")

    assert delete(doc, "table.a") is None
    assert doc == {"table": {}}


def test_delete_integer_then_read() -> None:
    doc = loads("value = 1")

    assert delete(doc, "value") == 1
    assert read(doc, "value") is None


def test_delete_string() -> None:
    doc = loads('value = "foo"')

    assert delete(doc, "value") == "foo"
    assert doc == {}


def test_delete_empty_table() -> None:
    doc = loads("[table]")

    assert delete(doc, "table") == {}
    assert doc == {}


def test_delete_empty_array() -> None:
    doc = loads("array = []")

    assert delete(doc, "array") == []
    assert doc == {}


def test_delete_nonempty_table() -> None:
    doc = loads("[table]\na = 1")

    with pytest.raises(CannotDeleteNonEmptyTableError, match="non-empty table"):
        delete(doc, "table")
    assert doc == {"table": {"a": 1}}


def test_delete_nonempty_array() -> None:
    doc = loads("array = [1]")

    with pytest.raises(CannotDeleteNonEmptyArrayError):
        delete(doc, "array")
    assert doc == {"array": [1]}


def test_delete_nonempty_containers_deep_in_document(fruit_doc) -> None:
    before = copy.deepcopy(fruit_doc)

    with pytest.raises(CannotDeleteNonEmptyTableError):
        delete(fruit_doc, "fruit.blah.[0].physical")
    with pytest.raises(CannotDeleteNonEmptyTableError):
        delete(fruit_doc, "fruit.blah.[0]")
    with pytest.raises(CannotDeleteNonEmptyArrayError):
        delete(fruit_doc, "fruit.blah")

    assert fruit_doc == before


def test_delete_nested_leaf(fruit_doc) -> None:
    assert delete(fruit_doc, "fruit.blah.[1].physical.shape") == "bent"
    assert read(fruit_doc, "fruit.blah.[1].physical") == {"color": "yellow"}


def test_delete_array_element_shifts_left() -> None:
    doc = loads("array = [1, 2, 3]")

    assert delete(doc, "array.[0]") == 1
    assert doc == {"array": [2, 3]}


def test_delete_array_index_out_of_bounds() -> None:
    doc = loads("array = [1, 2, 3]")

    with pytest.raises(ArrayIndexOutOfBoundsError) as excinfo:
        delete(doc, "array.[22]")

    assert str(excinfo.value) == "array index out of bounds (22, 3)"
    assert (excinfo.value.index, excinfo.value.length) == (22, 3)


def test_delete_through_missing_table() -> None:
    with pytest.raises(IdentifierNotFoundInDocumentError):
        delete({}, "table.a")


def test_delete_type_mismatches() -> None:
    doc = loads("array = [1]\nvalue = 1\n[table]")

    with pytest.raises(NoIndexInTableError):
        delete(doc, "table.[0]")
    with pytest.raises(NoIdentifierInArrayError):
        delete(doc, "array.a")
    with pytest.raises(QueryingValueAsTableError):
        delete(doc, "value.a")


def test_delete_with_separator() -> None:
    doc = {"a": {"b": 1}}

    assert delete(doc, "a:b", ":") == 1
    assert doc == {"a": {}}
