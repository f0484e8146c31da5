from __future__ import annotations

import logging
import os

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_log_level(raw: str) -> int:
    name = raw.strip().upper()
    if name.isdigit():
        return int(name)
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        raise ValueError(
            f"TOML_QUERY_LOG_LEVEL must be a logging level name, got {raw!r}"
        )
    return levels[name]


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


class TomlQueryConfig:
    """Process-wide settings, read from the environment once at import."""

    def __init__(self) -> None:
        self.log_level: int = _parse_log_level(
            os.getenv("TOML_QUERY_LOG_LEVEL", "WARNING")
        )
        self.rich_tracebacks: bool = _parse_bool(
            "TOML_QUERY_RICH_TRACEBACKS", os.getenv("TOML_QUERY_RICH_TRACEBACKS", "0")
        )

    def __repr__(self) -> str:
        return (
            f"TomlQueryConfig(log_level={logging.getLevelName(self.log_level)!r}, "
            f"rich_tracebacks={self.rich_tracebacks})"
        )


TOML_QUERY_CONFIG = TomlQueryConfig()

__all__ = ["TOML_QUERY_CONFIG", "TomlQueryConfig"]
