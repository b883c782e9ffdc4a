"""
Time helpers for exchange timestamps.

Exchange and sentiment feeds report epoch timestamps in milliseconds or
seconds; everything inside the engine is a timezone-aware UTC datetime.
"""

from datetime import datetime, timezone


def ms_to_utc(ts_ms: int) -> datetime:
    """Convert epoch milliseconds to a UTC datetime."""
    return datetime.fromtimestamp(ts_ms / 1000.0, tz=timezone.utc)


def seconds_to_utc(ts_s: int) -> datetime:
    """Convert epoch seconds to a UTC datetime."""
    return datetime.fromtimestamp(ts_s, tz=timezone.utc)

