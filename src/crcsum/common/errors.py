"""Error definitions for crcsum."""

from typing import Any, Dict


class CrcSumError(Exception):
    """Base exception for all crcsum errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class ConfigurationError(CrcSumError):
    """Configuration is invalid; the run cannot start."""
    pass


class InvalidModeError(ConfigurationError):
    """Checksum mode name is not one of the supported modes."""
    pass


class UsageError(CrcSumError):
    """Command line does not name anything to checksum."""
    pass


class FileProcessingError(CrcSumError):
    """Base exception for per-file errors.

    These never stop a run: the file is skipped and the exit code degrades.
    """
    pass


class FileOpenError(FileProcessingError):
    """File could not be opened."""
    pass


class FileReadError(FileProcessingError):
    """File was opened but reading it failed part way through."""
    pass


class WalkError(FileProcessingError):
    """Directory could not be listed during a tree walk."""
    pass


def classify_error(exception: Exception) -> str:
    """
    Classify an exception into an error category.

    Args:
        exception: The exception to classify

    Returns:
        Error category string: 'config', 'usage', 'open', 'read', 'walk',
        'permission', 'io', or 'unknown'
    """
    if isinstance(exception, ConfigurationError):
        return 'config'
    elif isinstance(exception, UsageError):
        return 'usage'
    elif isinstance(exception, FileOpenError):
        return 'open'
    elif isinstance(exception, FileReadError):
        return 'read'
    elif isinstance(exception, WalkError):
        return 'walk'
    elif isinstance(exception, PermissionError):
        return 'permission'
    elif isinstance(exception, OSError):
        return 'io'
    else:
        return 'unknown'
