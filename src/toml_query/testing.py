from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

from .config import TOML_QUERY_CONFIG
from .runtime.logging import get_logger


@dataclass(frozen=True)
class _TomlQueryConfigSnapshot:
    log_level: int
    rich_tracebacks: bool
    logger_level: int
    logger_handlers: tuple[logging.Handler, ...]

    @classmethod
    def capture(cls) -> "_TomlQueryConfigSnapshot":
        logger = get_logger()
        return cls(
            log_level=TOML_QUERY_CONFIG.log_level,
            rich_tracebacks=TOML_QUERY_CONFIG.rich_tracebacks,
            logger_level=logger.level,
            logger_handlers=tuple(logger.handlers),
        )

    def restore(self) -> None:
        TOML_QUERY_CONFIG.log_level = self.log_level
        TOML_QUERY_CONFIG.rich_tracebacks = self.rich_tracebacks
        logger = get_logger()
        logger.setLevel(self.logger_level)
        logger.handlers[:] = list(self.logger_handlers)


def _apply_test_config() -> None:
    TOML_QUERY_CONFIG.log_level = logging.DEBUG
    TOML_QUERY_CONFIG.rich_tracebacks = False


@contextmanager
def toml_query_test_env() -> Generator[None, None, None]:
    """Run with test settings; config and package logger are restored on exit."""

    snapshot = _TomlQueryConfigSnapshot.capture()
    _apply_test_config()
    try:
        yield
    finally:
        snapshot.restore()


__all__ = ["toml_query_test_env"]
