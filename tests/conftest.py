from collections.abc import Generator

import pytest

from toml_query import loads
from toml_query.testing import toml_query_test_env
from toml_query.value import TomlTable


@pytest.fixture()
def toml_query_env() -> Generator[None, None, None]:
    with toml_query_test_env():
        yield


FRUIT_TABLE = """
[[fruit.blah]]
  name = "apple"

  [fruit.blah.physical]
    color = "red"
    shape = "round"

[[fruit.blah]]
  name = "banana"

  [fruit.blah.physical]
    color = "yellow"
    shape = "bent"
"""


@pytest.fixture()
def fruit_doc() -> TomlTable:
    return loads(FRUIT_TABLE)
