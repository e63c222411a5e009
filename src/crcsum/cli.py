"""Command-line entry point for crcsum."""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TextIO

from .checksums import MODE_NAMES, DEFAULT_MODE_NAME, CrcMode
from .common import (
    ConfigLoader, ConfigurationError, LogContext, UsageError, WalkError,
    classify_error, setup_logging,
)
from .config import CHUNK_SIZE, CrcSumConfig
from .discovery import walk_files
from .processor import process_file
from .summary import ExitCode, RunSummary

# Application name derived from package name
APP_NAME = (__package__ or "crcsum").split('.')[0]

USAGE = "%(prog)s [-mode=<MODE>] [file [file ...] | -dir=<DIR>]"

logger = logging.getLogger(APP_NAME)


def checksum_command(
    mode: CrcMode,
    directory: str = "",
    files: Sequence[str] = (),
    chunk_size: int = CHUNK_SIZE,
    out: Optional[TextIO] = None,
) -> RunSummary:
    """Checksum every target and print the count line.

    A non-empty ``directory`` is walked and ``files`` is ignored.

    Args:
        mode: Checksum mode
        directory: Directory to walk, or "" to use ``files``
        files: Explicit target paths
        chunk_size: Bytes per read
        out: Stream for digest and count lines (default: sys.stdout)

    Returns:
        RunSummary for the run

    Raises:
        UsageError: If there is neither a directory nor any file, before
            any file is touched
    """
    if out is None:
        out = sys.stdout

    summary = RunSummary()

    def on_walk_error(error: WalkError) -> None:
        logger.error(error.message)
        summary.record_error(error)

    targets: Iterable[str]
    if directory:
        targets = walk_files(directory, on_error=on_walk_error)
    elif files:
        targets = files
    else:
        raise UsageError("Specify one or more filenames to checksum.")

    for path in targets:
        summary.record(process_file(path, mode, out=out, chunk_size=chunk_size))

    out.write(f"Count = {summary.count}\n")

    categories = dict(Counter(classify_error(e) for e in summary.errors))
    logger.info(
        f"Run complete: {{'count': {summary.count}, 'succeeded': {summary.succeeded}, "
        f"'failed': {summary.failed}, 'errors': {categories}}}"
    )
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        usage=USAGE,
        description="Compute CRC checksums for one or more files",
    )
    parser.add_argument(
        "-mode", "--mode",
        dest="mode",
        default=None,
        metavar="MODE",
        help=(
            f"CRC method to use: {', '.join(MODE_NAMES)} "
            f"(default: {DEFAULT_MODE_NAME}, overrides config)"
        ),
    )
    parser.add_argument(
        "-dir", "--dir",
        dest="dir",
        default="",
        metavar="DIR",
        help="Directory to walk; file arguments are ignored when set",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)",
    )
    parser.add_argument(
        "files",
        # Flags end at the first file, so later "-x" arguments are file names
        nargs=argparse.REMAINDER,
        metavar="file",
        help="Files to checksum",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the crcsum command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    loader = ConfigLoader(config_class=CrcSumConfig, app_name=APP_NAME)
    try:
        config = loader.load(defaults_path=args.config)
    except ConfigurationError as e:
        setup_logging()
        logger.error(e.message)
        return ExitCode.CONFIG_ERROR

    setup_logging(
        level=config.logging.level,
        format=config.logging.format,
        log_file=Path(config.logging.file) if config.logging.file else None,
    )

    # Mode is checked before targets so a bad mode always exits 1
    mode_name = args.mode if args.mode is not None else config.checksum.mode
    try:
        mode = CrcMode.from_name(mode_name)
    except ConfigurationError as e:
        logger.error(e.message)
        return ExitCode.CONFIG_ERROR

    with LogContext(mode=mode.mode_name):
        try:
            summary = checksum_command(
                mode,
                directory=args.dir,
                files=args.files,
                chunk_size=config.checksum.chunk_size,
            )
        except UsageError as e:
            parser.print_usage(sys.stderr)
            logger.error(e.message)
            return ExitCode.NO_TARGETS

    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
