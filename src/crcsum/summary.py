"""Run status accounting."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from .common.errors import FileProcessingError
from .processor import FileResult


class ExitCode(IntEnum):
    """Process exit statuses."""

    SUCCESS = 0
    CONFIG_ERROR = 1  # invalid mode or configuration
    NO_TARGETS = 2
    FILE_ERROR = 3


@dataclass
class RunSummary:
    """Aggregate of every per-file outcome in a run.

    ``count`` is the number of targets attempted, failures included. Walk
    errors degrade the exit code but are not targets, so they do not count.
    """
    count: int = 0
    succeeded: int = 0
    errors: List[FileProcessingError] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        self.count += 1
        if result.ok:
            self.succeeded += 1
        else:
            self.errors.append(result.error)

    def record_error(self, error: FileProcessingError) -> None:
        self.errors.append(error)

    @property
    def failed(self) -> int:
        return len(self.errors)

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.FILE_ERROR if self.errors else ExitCode.SUCCESS
