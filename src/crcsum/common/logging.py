"""Logging setup for crcsum.

Diagnostics go to stderr (stdout is reserved for digest lines and the
count) and, optionally, to a rotating JSON log file.
"""

import logging
import logging.handlers
import json
import sys
from typing import Any, Dict, Optional, TextIO
from datetime import datetime, timezone
from pathlib import Path

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, plus any fields set by LogContext."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(getattr(record, "extra_fields", {}))
        return json.dumps(log_data, default=str)


class DetailedFormatter(logging.Formatter):
    """Timestamped console lines with the emitting function."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


class SimpleFormatter(logging.Formatter):
    """Terse console formatter: ``crcsum: ERROR: message``."""

    def __init__(self, prog: str = "crcsum") -> None:
        super().__init__(fmt=f"{prog}: %(levelname)s: %(message)s")


CONSOLE_FORMATTERS = {
    "simple": SimpleFormatter,
    "detailed": DetailedFormatter,
    "json": StructuredFormatter,
}


def setup_logging(
    level: str = "WARNING",
    format: str = "simple",
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure the root logger, replacing any existing handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Console format (simple, detailed, json)
        log_file: Optional log file path; always written as JSON
        stream: Console stream (default: sys.stderr at call time)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(CONSOLE_FORMATTERS.get(format, SimpleFormatter)())
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
        )
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)


class LogContext:
    """Attach structured fields to every record created inside the block."""

    def __init__(self, **fields: Any) -> None:
        self.fields = fields
        self.old_factory = None

    def __enter__(self) -> "LogContext":
        self.old_factory = logging.getLogRecordFactory()

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = self.old_factory(*args, **kwargs)
            if not hasattr(record, "extra_fields"):
                record.extra_fields = {}
            record.extra_fields.update(self.fields)
            return record

        logging.setLogRecordFactory(record_factory)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        logging.setLogRecordFactory(self.old_factory)
