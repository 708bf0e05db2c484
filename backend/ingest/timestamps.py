"""
Receipt clock and RFC 3339 rendering at nanosecond resolution.

Capture times are plain integers (nanoseconds since the Unix epoch) because
datetime stops at microseconds and file names must stay unique per event.
"""

import time
from datetime import datetime, timezone

NANOS_PER_SECOND = 1_000_000_000


def now_ns() -> int:
    return time.time_ns()


def to_datetime(created_at: int) -> datetime:
    """UTC datetime for a nanosecond timestamp (sub-microsecond part dropped)."""
    seconds, nanos = divmod(created_at, NANOS_PER_SECOND)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=nanos // 1000)


def format_rfc3339_nano(created_at: int) -> str:
    """
    e.g. 2024-12-31T10:00:00.1234567Z

    Trailing zeros of the fraction are trimmed and a whole second has no
    fraction at all.
    """
    seconds, nanos = divmod(created_at, NANOS_PER_SECOND)
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if nanos:
        text += "." + f"{nanos:09d}".rstrip("0")
    return text + "Z"
