"""
File helpers for the renaming pipeline.

This module reads the newline-delimited list of metadata paths, splits a
listed path into its stem and extension, and performs the scoped byte reads
and writes used for each batch item.
"""
from pathlib import Path
from typing import List, Tuple


def read_path_list(list_file: Path) -> List[str]:
    """
    Return the non-blank lines of `list_file`, in order.

    A UTF-8 byte order mark and Windows line endings are tolerated. Only line feeds
    separate entries; one trailing carriage return is dropped from each line.
    Lines are otherwise kept verbatim, so paths with surrounding spaces stay intact.
    """
    with open(list_file, "r", encoding="utf-8-sig", newline="") as fh:
        lines = [line.removesuffix("\r") for line in fh.read().split("\n")]
    return [line for line in lines if line.strip()]


def split_name(path: str) -> Tuple[str, str, str]:
    """
    Split the last component of `path` into (name, stem, ext).

    Both '/' and '\\' are treated as separators so lists produced on Windows
    resolve the same way. The extension starts at the last '.' of the name
    and keeps it; a name without a dot has an empty extension.
    Examples:
      "/data/in/source.json" -> ("source.json", "source", ".json")
      "C:\\in\\clip.v2.json" -> ("clip.v2.json", "clip.v2", ".json")
      "README"               -> ("README", "README", "")
    """
    normalized = path.replace("\\", "/").rstrip("/")
    name = normalized.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot == -1:
        return name, name, ""
    return name, name[:dot], name[dot:]


def read_bytes(path: str) -> bytes:
    """Read the whole file at `path`."""
    with open(path, "rb") as fh:
        return fh.read()


def write_bytes(target: Path, data: bytes) -> None:
    """Write `data` to `target`, replacing any existing file."""
    with open(target, "wb") as fh:
        fh.write(data)
