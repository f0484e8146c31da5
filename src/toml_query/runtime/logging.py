"""Logging for toml-query.

The package logs through the standard library under the ``toml_query`` logger
and never touches handlers on import. ``configure_logging`` attaches a rich
console handler for interactive use.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text
from rich.traceback import Traceback

from ..config import TOML_QUERY_CONFIG

LOGGER_NAME = "toml_query"
ACTION_COLOR_ATTR = "toml_query_action_color"

_ACTION_COLORS = {
    "read": "cyan",
    "set": "yellow",
    "insert": "green",
    "delete": "red",
}


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def log_action(action: str, message: str, *args: object) -> None:
    """Emit a DEBUG record whose first word is ``action``."""

    logger = get_logger()
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        f"{action} {message}",
        *args,
        extra={ACTION_COLOR_ATTR: _ACTION_COLORS.get(action)},
        stacklevel=2,
    )


class _TomlQueryRichConsoleHandler(logging.Handler):
    def __init__(self, *, rich_tracebacks: bool = False) -> None:
        super().__init__()
        self._console = Console(stderr=True)
        self._rich_tracebacks = rich_tracebacks

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        color = getattr(record, ACTION_COLOR_ATTR, None)
        if not color:
            return Text(message)

        action, sep, rest = message.partition(" ")
        text = Text()
        text.append(action, style=color)
        text.append(sep + rest)
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = Text.assemble(
                (f"{record.levelname:<8} ", "bold"),
                self._format_message_text(record),
                " ",
                (self._format_location(record), "dim"),
            )
            self._console.print(line)
            if record.exc_info and record.exc_info[1] is not None:
                if self._rich_tracebacks:
                    exc_type, exc_value, tb = record.exc_info
                    assert exc_type is not None
                    self._console.print(Traceback.from_exception(exc_type, exc_value, tb))
                else:
                    self._console.print(logging.Formatter().formatException(record.exc_info))
        except Exception:
            self.handleError(record)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the rich console handler to the package logger (idempotent)."""

    logger = get_logger()
    if not any(isinstance(h, _TomlQueryRichConsoleHandler) for h in logger.handlers):
        logger.addHandler(
            _TomlQueryRichConsoleHandler(
                rich_tracebacks=TOML_QUERY_CONFIG.rich_tracebacks
            )
        )
    logger.setLevel(TOML_QUERY_CONFIG.log_level if level is None else level)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger", "log_action"]
