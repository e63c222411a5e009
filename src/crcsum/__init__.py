"""crcsum: CRC32 and CRC64 checksums for files and directory trees."""

from .checksums import CrcMode, CrcHash, new
from .processor import FileResult, checksum_file, process_file
from .summary import ExitCode, RunSummary

__version__ = "0.1.0"

__all__ = [
    'CrcMode',
    'CrcHash',
    'new',
    'FileResult',
    'checksum_file',
    'process_file',
    'ExitCode',
    'RunSummary',
]
