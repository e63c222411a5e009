"""Common utilities for crcsum: configuration, logging and errors."""

from .config import ConfigLoader
from .logging import setup_logging, LogContext
from .logging_config import LoggingConfig
from .errors import (
    CrcSumError, ConfigurationError, InvalidModeError, UsageError,
    FileProcessingError, FileOpenError, FileReadError, WalkError,
    classify_error,
)

__all__ = [
    'ConfigLoader',
    'LoggingConfig',
    'setup_logging',
    'LogContext',
    'CrcSumError',
    'ConfigurationError',
    'InvalidModeError',
    'UsageError',
    'FileProcessingError',
    'FileOpenError',
    'FileReadError',
    'WalkError',
    'classify_error',
]
