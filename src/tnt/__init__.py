"""
Batch renaming of media metadata sidecar files.

This package reads JSON sidecar documents describing media items, derives a
canonical filename from the transliterated project name and the season and
episode numbers, and writes a re-rendered copy of each document under that
name.

The package is organized into:
- rename: Transliteration, filename formatting, sidecar parsing and the batch driver.
- utils: Constants, file helpers and structured logging.
- cli: The `tnt` command line entry point.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
