import datetime

import pytest

from toml_query.errors import InvalidValueError
from toml_query.value import is_non_empty_container, kind_of


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ({}, "Table"),
        ([], "Array"),
        ("s", "String"),
        (1, "Integer"),
        (1.0, "Float"),
        (True, "Boolean"),
        (datetime.datetime(2024, 1, 1), "Datetime"),
        (datetime.date(2024, 1, 1), "Datetime"),
        (datetime.time(12, 30), "Datetime"),
    ],
)
def test_kind_of_names_variants(value: object, kind: str) -> None:
    assert kind_of(value) == kind


def test_kind_of_rejects_foreign_objects() -> None:
    with pytest.raises(InvalidValueError, match="NoneType"):
        kind_of(None)


def test_only_filled_containers_are_non_empty() -> None:
    assert is_non_empty_container({"a": 1}) is True
    assert is_non_empty_container([0]) is True
    assert is_non_empty_container({}) is False
    assert is_non_empty_container([]) is False
    assert is_non_empty_container("") is False
    assert is_non_empty_container(0) is False
