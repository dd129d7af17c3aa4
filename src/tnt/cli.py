#!/usr/bin/env python3
"""
tnt: rename metadata sidecar files from a list of paths.

Usage:
    tnt LIST_FILE [--output-dir DIR] [--dry-run] [--log-level LEVEL] [--no-progress]

Exit status:
    0  every listed file was renamed (or previewed with --dry-run)
    1  at least one listed file failed
    2  the path list or output directory is unusable
"""

import argparse
import sys
from pathlib import Path

import tnt as tnt_module
from tnt import rename
from tnt.rename.errors import ListFileError
from tnt.utils import (
    DEFAULT_LOG_LEVEL,
    EXIT_FATAL,
    EXIT_ITEM_FAILURES,
    EXIT_OK,
    OUTPUT_DIR,
    STATUS_DRY_RUN,
    STATUS_OK,
    LogLevel,
    logger,
)

LOG_LEVELS = [level.name for level in LogLevel]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tnt",
        description="Rename metadata sidecar files to Project_sXXeYY_name.ext using their JSON contents. "
                    "Renamed copies are written to the output directory; the originals are left untouched.",
        epilog="Example: tnt files.txt --output-dir ./renamed",
    )
    parser.add_argument("list_file", nargs="?", help="Text file listing one metadata file path per line")
    parser.add_argument(
        "--output-dir",
        default=OUTPUT_DIR,
        help="Directory for renamed files (default: current directory or $TNT_OUTPUT_DIR)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Preview new names without writing files")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL} or $TNT_LOG_LEVEL)",
    )
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar and per-file lines")
    parser.add_argument("--version", action="version", version=f"%(prog)s {tnt_module.__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Show help and exit cleanly if no path list was given.
    if args.list_file is None:
        print("No arguments were provided.")
        print("Pass one text file with a list of file paths to parse.")
        parser.print_help()
        return EXIT_OK

    try:
        logger.set_log_level(LogLevel.from_name(args.log_level or DEFAULT_LOG_LEVEL))
    except ValueError as e:
        parser.error(str(e))

    output_dir = Path(args.output_dir).expanduser()
    if not args.dry_run:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"ERROR: Cannot use output directory {output_dir}: {e}", file=sys.stderr)
            return EXIT_FATAL

    try:
        report = rename.run(
            Path(args.list_file).expanduser(),
            output_dir=output_dir,
            dry_run=args.dry_run,
            show_progress=not args.no_progress,
        )
    except ListFileError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FATAL

    print(
        f"\nDone. OK={report.count(STATUS_OK)} FAIL={report.failed} "
        f"DRY-RUN={report.count(STATUS_DRY_RUN)}"
    )
    return EXIT_ITEM_FAILURES if report.failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
