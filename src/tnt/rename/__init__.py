"""
Metadata sidecar renaming.

This package turns a list of metadata sidecar paths into renamed, re-rendered
copies whose names follow the "Project_s01e03_stem.ext" convention.

Package organization:
- translit: Transliteration of project names into Latin, filesystem-safe text.
- formatter: Canonical filename construction.
- metadata: Parsing, validation and rendering of sidecar JSON documents.
- core: The per-item pipeline (read, parse, validate, name, write).
- batch: Batch processing of a path list with progress reporting.
- errors: Exceptions raised along the pipeline.

Public API (top-level exports)
- `transliterate`, `capitalize_first`: Name transliteration.
- `build_filename`: Canonical filename for (project, season, episode, stem, ext).
- `parse_metadata`, `serialize_metadata`, `validate_metadata`: Sidecar documents.
- `rename_metadata_file`: Process one path, returning a `BatchItem`.
- `run`: Process a whole path list, returning a `BatchReport`.

Behavior notes:
- Item failures (read, parse, validation, transliteration, write) are recorded
  on the item and never stop the batch. Only `ListFileError` is fatal.
- Transliteration is strict: a character without a rule fails the item.

Example:
    from pathlib import Path
    import tnt.rename as rename
    report = rename.run(Path("files.txt"), output_dir=Path("."))
"""
from .translit import capitalize_first, transliterate

from .formatter import build_filename

from .metadata import (
    MetadataRecord,
    parse as parse_metadata,
    serialize as serialize_metadata,
    validate as validate_metadata,
)

from .core import BatchItem, rename_metadata_file

from .batch import BatchReport, ProgressReporter, run

__all__ = [
    # Transliteration
    "transliterate",
    "capitalize_first",
    # Formatting
    "build_filename",
    # Metadata
    "MetadataRecord",
    "parse_metadata",
    "serialize_metadata",
    "validate_metadata",
    # Per-item and batch processing
    "BatchItem",
    "rename_metadata_file",
    "BatchReport",
    "ProgressReporter",
    "run",
]
