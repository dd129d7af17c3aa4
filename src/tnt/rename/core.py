"""
Per-item renaming of metadata sidecar files.

This module runs the whole pipeline for one listed path: read the sidecar,
parse and validate it, derive the canonical filename from the transliterated
project name, and write the re-rendered document into the output directory.

Functions:
- derive_filename: Computes the canonical filename for a parsed record.
- rename_metadata_file: Runs the pipeline for one path and returns its BatchItem.
"""
from dataclasses import dataclass
from pathlib import Path

from tnt.rename import formatter, metadata, translit
from tnt.rename.errors import ItemError, ItemReadError, ItemWriteError
from tnt.utils import STATUS_DRY_RUN, STATUS_FAIL, STATUS_OK, LogLevel, file_util, logger


@dataclass
class BatchItem:
    """Outcome of one line of the path list."""

    index: int
    source: str
    name: str
    status: str = STATUS_FAIL
    new_name: str | None = None
    error: ItemError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def derive_filename(record: metadata.MetadataRecord, stem: str, ext: str) -> str:
    """
    Build the canonical filename for a record.

    The record must already be validated. The project name is transliterated
    and its first letter uppercased before formatting.
    """
    project = translit.capitalize_first(translit.transliterate(record.project))
    return formatter.build_filename(project, record.season, record.episode, stem, ext)


def _read(path: str) -> bytes:
    try:
        return file_util.read_bytes(path)
    except (OSError, ValueError) as e:
        raise ItemReadError(f"cannot read {path!r}: {getattr(e, 'strerror', None) or e}") from e


def _write(target: Path, data: bytes) -> None:
    try:
        file_util.write_bytes(target, data)
    except (OSError, ValueError) as e:
        raise ItemWriteError(f"cannot write {str(target)!r}: {getattr(e, 'strerror', None) or e}") from e


def rename_metadata_file(index: int, source: str, output_dir: Path, dry_run: bool = False) -> BatchItem:
    """
    Rename one metadata file into `output_dir`.

    Parameters:
    - index (int): 1-based position of the path in the list.
    - source (str): Path of the metadata file, as listed.
    - output_dir (Path): Directory the renamed copy is written to.
    - dry_run (bool): When True, compute the new name but write nothing.

    Returns:
    - BatchItem: status OK / DRY-RUN with `new_name`, or FAIL with `error`.
      Item-level failures are returned, never raised.
    """
    name, stem, ext = file_util.split_name(source)
    item = BatchItem(index=index, source=source, name=name)

    try:
        record = metadata.parse(_read(source))
        metadata.validate(record)
        item.new_name = derive_filename(record, stem, ext)
        payload = metadata.serialize(record)

        if dry_run:
            item.status = STATUS_DRY_RUN
            logger.log("item.dry_run", LogLevel.DEBUG, source=source, new_name=item.new_name)
            return item

        _write(output_dir / item.new_name, payload)
    except ItemError as e:
        item.status = STATUS_FAIL
        item.error = e
        return item

    item.status = STATUS_OK
    logger.log("item.renamed", LogLevel.DEBUG, source=source, new_name=item.new_name)
    return item
