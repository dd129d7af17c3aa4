"""
Constants and configuration settings for metadata renaming.

This module contains the constants shared by the renaming pipeline: the
environment-driven defaults for the output directory and log level, the
status codes shown in batch reports, and the JSON rendering settings used
when metadata files are rewritten. Values are read from the environment
after loading an optional `.env` file from the working directory.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Run settings
OUTPUT_DIR = os.getenv("TNT_OUTPUT_DIR", ".")
DEFAULT_LOG_LEVEL = os.getenv("TNT_LOG_LEVEL", "INFO")

# JSON rendering
JSON_INDENT = 2
JSON_ENCODING = "utf-8"

# Filename layout: Project_s01e03_stem.ext
NAME_SEPARATOR = "_"
MIN_NUMBER_WIDTH = 2

# Processing status codes
STATUS_OK = "OK"
STATUS_FAIL = "FAIL"
STATUS_DRY_RUN = "DRY-RUN"

# Exit codes
EXIT_OK = 0
EXIT_ITEM_FAILURES = 1
EXIT_FATAL = 2
