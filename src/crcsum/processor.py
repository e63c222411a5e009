"""Per-file checksum processing.

Each target goes Opening -> Reading -> Finalized. An open or read failure
skips the file: the error is logged to stderr and returned in the
:class:`FileResult`, and no digest line is written. Only a finalized file
produces output.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from .checksums import CrcHash, CrcMode, new
from .common.errors import FileOpenError, FileProcessingError, FileReadError
from .config import CHUNK_SIZE

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Outcome of processing one target.

    Attributes:
        path: Target path as given
        digest: Lowercase hex digest, None if the file was skipped
        error: Error that caused the skip, None on success
    """
    path: str
    digest: Optional[str] = None
    error: Optional[FileProcessingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def checksum_file(path: str, mode: CrcMode, chunk_size: int = CHUNK_SIZE) -> CrcHash:
    """
    Stream a whole file through a fresh accumulator.

    Args:
        path: File to read
        mode: Checksum mode
        chunk_size: Bytes per read

    Returns:
        The finalized accumulator

    Raises:
        FileOpenError: If the file cannot be opened
        FileReadError: If a read fails part way through (the handle is
            closed and the partial state dropped), or if the path is a
            directory
    """
    try:
        f = open(path, 'rb')
    except IsADirectoryError as e:
        # Directories count as read failures, not open failures
        raise FileReadError(f"Error reading {path!r}: {e}", path=path, cause=e) from e
    except OSError as e:
        raise FileOpenError(f"Cannot open {path!r}: {e}", path=path, cause=e) from e

    with f:
        crc = new(mode)
        try:
            while chunk := f.read(chunk_size):
                crc.update(chunk)
        except OSError as e:
            raise FileReadError(f"Error reading {path!r}: {e}", path=path, cause=e) from e

    return crc


def format_result_line(digest: str, path: str) -> str:
    return f"{digest}\t{path}\n"


def process_file(
    path: str,
    mode: CrcMode,
    out: Optional[TextIO] = None,
    chunk_size: int = CHUNK_SIZE,
) -> FileResult:
    """Checksum one target and write its result line.

    Never raises for file-level problems; they come back in the result.

    Args:
        path: Target path
        mode: Checksum mode
        out: Stream for the digest line (default: sys.stdout)
        chunk_size: Bytes per read

    Returns:
        FileResult for the target
    """
    if out is None:
        out = sys.stdout

    try:
        crc = checksum_file(path, mode, chunk_size)
    except FileProcessingError as e:
        logger.error(e.message)
        return FileResult(path=path, error=e)

    digest = crc.hexdigest()
    out.write(format_result_line(digest, path))
    logger.debug(f"Checksummed: {{'path': {path!r}, 'mode': {mode.mode_name!r}, 'digest': {digest!r}}}")
    return FileResult(path=path, digest=digest)
