"""
Clock helpers shared by the span implementations.
"""

from datetime import datetime, timezone
import time


def current_time_millis() -> int:
    """
    Return the wall-clock time in approximate milliseconds since the epoch.

    The clock is not monotonic; callers must not assume successive calls
    return increasing values.
    """
    return time.time_ns() // 1_000_000


def millis_to_datetime(millis: int) -> datetime:
    """
    Convert epoch milliseconds to a timezone-aware UTC datetime.

    Args:
        millis: Milliseconds since the epoch

    Returns:
        The corresponding datetime in UTC
    """
    return datetime.fromtimestamp(millis / 1000.0, tz=timezone.utc)
