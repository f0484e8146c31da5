"""Tests for read and read_mut."""

import pytest

from toml_query import loads, read, read_mut
from toml_query.errors import EmptyQueryError, NoIndexInTableError


def test_read_walks_table_path() -> None:
    """Reader should follow dot-separated keys through nested tables."""

    doc = {"config": {"dataset": {"name": "mnist", "size": 128}}}

    assert read(doc, "config.dataset.name") == "mnist"
    assert read(doc, "config.dataset.size") == 128


def test_read_walks_array_path() -> None:
    """Reader should index arrays with bracketed segments."""

    doc = {"deps": [{"name": "a"}, {"name": "b"}]}

    assert read(doc, "deps.[1].name") == "b"
    assert read(doc, "deps.[0]") == {"name": "a"}


def test_read_returns_none_for_absent_segments() -> None:
    doc = {"config": {"seed": 42}, "values": [10, 20]}

    assert read(doc, "config.missing") is None
    assert read(doc, "values.[10]") is None


def test_read_empty_table() -> None:
    doc = loads("[table]")

    assert read(doc, "table") == {}
    assert read(doc, "table.a") is None


def test_read_with_separator() -> None:
    doc = loads("[table]\na = 1")

    assert read(doc, "table/a", "/") == 1
    assert read(doc, "table.a", "/") is None


def test_read_rejects_index_on_table() -> None:
    doc = loads("[table]\na = 1")

    with pytest.raises(NoIndexInTableError):
        read(doc, "table.[0]")


def test_read_rejects_empty_query() -> None:
    with pytest.raises(EmptyQueryError):
        read({}, "")


def test_read_does_not_modify_document() -> None:
    doc = {"a": {"b": [1, 2]}}

    read(doc, "a.x.y")
    read(doc, "a.b.[5]")

    assert doc == {"a": {"b": [1, 2]}}


def test_read_mut_allows_in_place_edits() -> None:
    doc = loads("[table]\nitems = [1, 2]")

    items = read_mut(doc, "table.items")
    assert items is not None
    items.append(3)
    table = read_mut(doc, "table")
    table["extra"] = True

    assert doc == {"table": {"items": [1, 2, 3], "extra": True}}


def test_read_mut_returns_none_when_missing() -> None:
    assert read_mut({"a": {}}, "a.b") is None
