"""
A module providing constants, file helpers, and logging mechanisms
for metadata renaming tasks.

This module includes the configuration constants and status codes used by
the batch pipeline, file utilities for reading path lists and writing
renamed metadata, and a structured logger that cooperates with the tqdm
progress bar.
"""

from .constants import (
    DEFAULT_LOG_LEVEL,
    EXIT_FATAL,
    EXIT_ITEM_FAILURES,
    EXIT_OK,
    JSON_ENCODING,
    JSON_INDENT,
    MIN_NUMBER_WIDTH,
    NAME_SEPARATOR,
    OUTPUT_DIR,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_OK,
)
from .logger import LogLevel

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "EXIT_FATAL",
    "EXIT_ITEM_FAILURES",
    "EXIT_OK",
    "JSON_ENCODING",
    "JSON_INDENT",
    "MIN_NUMBER_WIDTH",
    "NAME_SEPARATOR",
    "OUTPUT_DIR",
    "STATUS_DRY_RUN",
    "STATUS_FAIL",
    "STATUS_OK",
    "LogLevel",
]
