from cmdy.core.time.abc import Time
from cmdy.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
