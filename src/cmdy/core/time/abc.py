"""Time operations abstraction for testing.

Execution records and per-command durations read the clock through this
interface so tests can pin timestamps.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local date and time."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock reading in seconds, for measuring durations."""
        ...
