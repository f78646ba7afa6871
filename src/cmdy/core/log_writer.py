"""Append-only execution log.

Each run becomes one text block:

    2025-03-01 09:15:02 - Executed: Build in /tmp (2/3 succeeded)
      [ok] true (exit 0)
      [FAIL] false (exit 1)
      [ok] true (exit 0)

Blocks are only ever appended; existing log content is never rewritten.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from cmdy.core.errors import LogReadError, LogWriteError
from cmdy.core.types import ExecutionRecord

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_record(record: ExecutionRecord) -> str:
    """Render an execution record as a log block ending in a newline."""
    header = (
        f"{record.timestamp.strftime(TIMESTAMP_FORMAT)} - Executed: {record.command_set_name}"
        f" in {record.directory} ({record.succeeded_count}/{len(record.results)} succeeded)"
    )
    lines = [header]
    for result in record.results:
        status = "ok" if result.succeeded else "FAIL"
        lines.append(f"  [{status}] {result.command} (exit {result.exit_status})")
    return "\n".join(lines) + "\n"


class LogWriter(ABC):
    """Abstract interface for the execution log."""

    @abstractmethod
    def append(self, record: ExecutionRecord) -> None:
        """Append one record to the log.

        Raises:
            LogWriteError: If the log could not be written
        """
        ...

    @abstractmethod
    def read(self) -> str | None:
        """Return the full log text, or None if nothing has been logged yet."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the log file (for messages)."""
        ...


class FileLogWriter(LogWriter):
    """Production implementation appending to a text file."""

    def __init__(self, log_path: Path) -> None:
        self._log_path = log_path

    def append(self, record: ExecutionRecord) -> None:
        entry = format_record(record)
        try:
            self._log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._log_path.open("a", encoding="utf-8") as f:
                f.write(entry)
        except OSError as e:
            raise LogWriteError(f"Failed to write log {self._log_path}: {e}") from e
        logger.debug("Appended execution record: path=%s", self._log_path)

    def read(self) -> str | None:
        if not self._log_path.exists():
            return None
        try:
            return self._log_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise LogReadError(f"Failed to read log {self._log_path}: {e}") from e

    def path(self) -> Path:
        return self._log_path
