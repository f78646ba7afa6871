"""Fake implementation of LogWriter for testing."""

from pathlib import Path

from cmdy.core.errors import LogReadError, LogWriteError
from cmdy.core.log_writer import LogWriter, format_record
from cmdy.core.types import ExecutionRecord


class FakeLogWriter(LogWriter):
    """In-memory log that keeps appended records.

    Examples:
        # Records are kept for assertions
        >>> writer = FakeLogWriter()
        >>> writer.append(record)
        >>> assert writer.records == [record]

        # Simulate a write failure
        >>> writer = FakeLogWriter(fail_with="disk full")

        # Simulate an unreadable log
        >>> writer = FakeLogWriter(read_error="permission denied")
    """

    def __init__(
        self,
        *,
        existing: str | None = None,
        fail_with: str | None = None,
        read_error: str | None = None,
    ) -> None:
        """Initialize fake log.

        Args:
            existing: Log text present before any append (None = no log yet)
            fail_with: If set, append() raises LogWriteError with this message
            read_error: If set, read() raises LogReadError with this message
        """
        self._content = existing
        self._fail_with = fail_with
        self._read_error = read_error
        self._records: list[ExecutionRecord] = []

    @property
    def records(self) -> list[ExecutionRecord]:
        """Records appended so far, for test assertions."""
        return self._records.copy()

    def append(self, record: ExecutionRecord) -> None:
        if self._fail_with is not None:
            raise LogWriteError(self._fail_with)
        self._records.append(record)
        self._content = (self._content or "") + format_record(record)

    def read(self) -> str | None:
        if self._read_error is not None:
            raise LogReadError(self._read_error)
        return self._content

    def path(self) -> Path:
        return Path("/fake/cmdy/cmdy.log")
