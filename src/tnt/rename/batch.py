# python
"""Batch renaming of metadata sidecar files listed in a text file.

This module reads the newline-delimited path list, runs the per-item
pipeline from `tnt.rename.core` on every path in order, and collects the
outcomes into a `BatchReport`. A failing item is reported and skipped; only
an unusable path list stops the run.
"""
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from tnt.rename import core
from tnt.rename.core import BatchItem
from tnt.rename.errors import ListFileError
from tnt.utils import STATUS_DRY_RUN, STATUS_OK, LogLevel, file_util, logger


@dataclass
class BatchReport:
    """Outcomes of one batch run, in list order."""

    items: list[BatchItem] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def succeeded(self) -> int:
        return sum(1 for item in self.items if item.ok)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    def failures(self) -> list[BatchItem]:
        return [item for item in self.items if not item.ok]

    def count(self, status: str) -> int:
        return sum(1 for item in self.items if item.status == status)


class ProgressReporter:
    """Prints one console line per finished item.

    Lines look like "03/12 source.json > Kot_s01e03_source.json"; the index is
    padded to the number of digits of the batch size.
    """

    def __init__(self, total: int, enabled: bool = True):
        self.total = total
        self.width = len(str(total))
        self.enabled = enabled

    def prefix(self, index: int) -> str:
        return f"{index:0{self.width}d}/{self.total}"

    def format(self, item: BatchItem) -> str:
        head = f"{self.prefix(item.index)} {item.name}"
        if item.ok:
            marker = " (dry-run)" if item.status == STATUS_DRY_RUN else ""
            return f"{head} > {item.new_name}{marker}"
        return f"{head}  ❌ [{item.error.kind}] {item.error}"

    def report(self, item: BatchItem) -> None:
        if self.enabled:
            logger.safe_print(self.format(item))


def load_path_list(list_file: Path) -> list[str]:
    """
    Read the paths to process from `list_file`.

    Raises:
        ListFileError: The file cannot be read or lists no paths.
    """
    try:
        paths = file_util.read_path_list(list_file)
    except (OSError, UnicodeDecodeError) as e:
        raise ListFileError(f"cannot read path list {list_file}: {e}") from e
    if not paths:
        raise ListFileError(f"path list {list_file} is empty")
    logger.log("list.loaded", LogLevel.DEBUG, list_file=str(list_file), paths=len(paths))
    return paths


def run(list_file: Path, output_dir: Path = Path("."), dry_run: bool = False, show_progress: bool = True) -> BatchReport:
    """Rename every metadata file listed in `list_file` into `output_dir`.

    The function:
    - Loads the path list (fatal on failure, nothing is written).
    - Processes each path in order, isolating per-item failures.
    - Prints a line per item and shows a tqdm progress bar.

    Args:
        list_file (Path): Text file with one metadata path per line.
        output_dir (Path): Directory receiving the renamed files.
        dry_run (bool): If True, only compute the new names.
        show_progress (bool): If False, suppress the progress bar and item lines.

    Returns:
        BatchReport: One BatchItem per listed path.

    Raises:
        ListFileError: When the path list is missing, unreadable or empty.
    """
    paths = load_path_list(Path(list_file))
    output_dir = Path(output_dir)
    reporter = ProgressReporter(len(paths), enabled=show_progress)
    report = BatchReport()

    logger.log("batch.start", LogLevel.INFO, total=len(paths), output_dir=str(output_dir), dry_run=dry_run)

    for index, source in enumerate(tqdm(paths, desc="Renaming metadata", unit="file", disable=not show_progress), 1):
        item = core.rename_metadata_file(index, source, output_dir, dry_run=dry_run)
        report.items.append(item)
        reporter.report(item)
        if not item.ok:
            logger.log("item.failed", LogLevel.WARN, index=index, source=source, kind=item.error.kind, error=str(item.error))

    logger.log(
        "batch.complete",
        LogLevel.INFO,
        total=report.total,
        ok=report.count(STATUS_OK),
        dry_run=report.count(STATUS_DRY_RUN),
        failed=report.failed,
    )
    return report
