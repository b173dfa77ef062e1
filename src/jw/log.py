"""Leveled terminal logging for jw commands.

INFO and SUCCESS lines go to stdout; everything else goes to stderr so that
``jw go`` output stays clean for command substitution. ``--log-level trace``
shows everything ``debug`` does.
"""

from __future__ import annotations

import os
import sys
from enum import IntEnum

from rich.console import Console
from rich.text import Text


class LogLevel(IntEnum):
    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


LEVEL_NAMES = tuple(level.name.lower() for level in LogLevel)

_STYLES = {
    LogLevel.DEBUG: "cyan",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}
_STDOUT_LEVELS = frozenset({LogLevel.INFO, LogLevel.SUCCESS})

_configured_level: LogLevel | None = None
_no_color_override: bool | None = None


def _parse_level(value: str | None) -> LogLevel:
    name = (value or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    return LogLevel.__members__.get(name, LogLevel.INFO)


def configured_level() -> LogLevel:
    """Return the active level, reading ``JW_LOG_LEVEL`` on first use."""
    global _configured_level
    if _configured_level is None:
        _configured_level = _parse_level(os.environ.get("JW_LOG_LEVEL"))
    return _configured_level


def set_level(value: str | None) -> None:
    global _configured_level
    _configured_level = _parse_level(value)


def set_no_color(value: bool | None) -> None:
    """Force colors off (``True``) or defer to the environment (``None``)."""
    global _no_color_override
    _no_color_override = value


def _no_color() -> bool:
    if _no_color_override is not None:
        return _no_color_override
    return bool(os.environ.get("NO_COLOR") or os.environ.get("JW_NO_COLOR"))


def _emit(level: LogLevel, message: str) -> None:
    if level < configured_level():
        return
    console = Console(
        file=sys.stdout if level in _STDOUT_LEVELS else sys.stderr,
        soft_wrap=True,
        highlight=False,
        no_color=_no_color(),
    )
    console.print(Text(message, style=_STYLES.get(level, "")))


def debug(message: str) -> None:
    _emit(LogLevel.DEBUG, message)


def info(message: str) -> None:
    _emit(LogLevel.INFO, message)


def success(message: str) -> None:
    _emit(LogLevel.SUCCESS, message)


def warning(message: str) -> None:
    _emit(LogLevel.WARNING, message)


def error(message: str) -> None:
    _emit(LogLevel.ERROR, message)
