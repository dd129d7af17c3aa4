"""
Provides structured logging with log levels.

This module provides a structured logging system with UTC timestamps, log levels,
and key-value pair formatting for better log parsing and analysis. Lines are
written through tqdm so they never tear an active progress bar.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Any

from tqdm import tqdm

_separator = " | "


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Parse a level name such as 'debug' or 'WARNING'."""
        key = name.strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}") from None


_current_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def get_log_level() -> LogLevel:
    """Get the current log level."""
    return _current_level


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


def _write_line(text: str) -> None:
    tqdm.write(text)


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'batch.start', 'item.renamed')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    header = f"{timestamp}{_separator}[{level.name}]{_separator}{event}"
    kv_str = _format_kv(kwargs) if kwargs else ""

    if kv_str:
        _write_line(f"{header}{_separator}{kv_str}")
    else:
        _write_line(header)


def safe_print(text: str = "") -> None:
    """Print a console line without breaking an active progress bar."""
    _write_line(text)
