"""Real time implementation using the system clock."""

import time
from datetime import datetime

from cmdy.core.time.abc import Time


class RealTime(Time):
    """Production implementation using datetime.now() and time.monotonic()."""

    def now(self) -> datetime:
        return datetime.now()

    def monotonic(self) -> float:
        return time.monotonic()
